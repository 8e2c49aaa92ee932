"""
Unit tests for the validation engine.
"""

import pytest

from bean_validator.core.rules import RuleRegistry, ValidationEngine
from bean_validator.core.validators import ValidatorNotFound
from bean_validator.core.validators.rule_types import (
    CREDIT_CARD_NUMBER,
    EMAIL,
    MAX,
    MIN,
    NOT_BLANK,
    NOT_EMPTY,
    SIZE,
    UNIQUE_ELEMENTS,
)
from bean_validator.service import define_field


class Applicant:
    """Plain object used as the validated instance"""


class TestValidationEngine:
    """Tests for ValidationEngine"""

    def test_instance_without_rules_is_valid(self, engine):
        assert engine.validate(Applicant()) == {}
        assert engine.validate(object()) == {}

    def test_min_failure_reports_message(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "age", 16, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)

        assert engine.validate(applicant) == {"age": ["too young"]}

    def test_passing_field_is_absent(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "email", "a@b.com", [
            {"type": EMAIL, "message": "bad email"}
        ], registry=registry)

        assert engine.validate(applicant) == {}

    def test_unique_elements_scenario(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "tags", ["a", "a"], [
            {"type": UNIQUE_ELEMENTS, "message": "dup"}
        ], registry=registry)
        assert engine.validate(applicant) == {"tags": ["dup"]}

        applicant.tags = ["a", "b"]
        assert engine.validate(applicant) == {}

    def test_credit_card_scenario(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "card", "4111111111111111", [
            {"type": CREDIT_CARD_NUMBER, "message": "invalid"}
        ], registry=registry)
        assert engine.validate(applicant) == {}

        applicant.card = "4111111111111112"
        assert engine.validate(applicant) == {"card": ["invalid"]}

    def test_all_failing_rules_reported_in_order(self, engine, registry):
        """No short-circuit: every failing rule contributes, in descriptor order"""
        applicant = Applicant()
        define_field(applicant, "name", "", [
            {"type": NOT_EMPTY, "message": "first"},
            {"type": SIZE, "message": "passes", "params": {"max": 5}},
            {"type": NOT_BLANK, "message": "third"},
        ], registry=registry)

        assert engine.validate(applicant) == {"name": ["first", "third"]}

    def test_fields_reported_in_definition_order(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "b", None, [{"type": NOT_EMPTY, "message": "b"}], registry=registry)
        define_field(applicant, "a", None, [{"type": NOT_EMPTY, "message": "a"}], registry=registry)

        assert list(engine.validate(applicant)) == ["b", "a"]

    def test_missing_validator_aborts_call(self, engine, registry):
        """An unknown rule type is a configuration failure, not a validation entry"""
        applicant = Applicant()
        define_field(applicant, "age", 16, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)
        define_field(applicant, "name", "x", [
            {"type": "doesNotExist", "message": "never reported"}
        ], registry=registry)

        with pytest.raises(ValidatorNotFound) as exc_info:
            engine.validate(applicant)

        assert exc_info.value.rule_type == "doesNotExist"
        assert exc_info.value.field_name == "name"
        assert "doesNotExist" in str(exc_info.value)

    def test_rule_type_resolved_lazily(self, engine, registry, table):
        """Rules may reference a validator registered after the field was defined"""
        applicant = Applicant()
        define_field(applicant, "code", "B-1", [
            {"type": "startsWithA", "message": "must start with A"}
        ], registry=registry)

        table.register("startsWithA", lambda value, params: str(value).startswith("A"))

        assert engine.validate(applicant) == {"code": ["must start with A"]}

    def test_validation_is_idempotent(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "age", 16, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)

        assert engine.validate(applicant) == engine.validate(applicant)

    def test_reflects_current_value(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "age", 16, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)

        applicant.age = 30
        assert engine.validate(applicant) == {}

    def test_deleted_field_is_treated_as_absent(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "name", "Ada", [
            {"type": NOT_EMPTY, "message": "required"}
        ], registry=registry)

        del applicant.name
        assert engine.validate(applicant) == {"name": ["required"]}

    def test_redefinition_replaces_rules(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "age", 16, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)
        define_field(applicant, "age", 16, [
            {"type": MAX, "message": "too old", "params": {"max": 10}}
        ], registry=registry)

        assert engine.validate(applicant) == {"age": ["too old"]}

    def test_rules_shared_across_instances(self, engine, registry):
        first = Applicant()
        define_field(first, "age", 30, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)

        second = Applicant()
        second.age = 10

        assert engine.validate(second) == {"age": ["too young"]}

    def test_shadowed_builtin_is_used(self, engine, registry, table):
        applicant = Applicant()
        define_field(applicant, "email", "not-an-email", [
            {"type": EMAIL, "message": "bad email"}
        ], registry=registry)
        assert engine.validate(applicant) == {"email": ["bad email"]}

        table.register(EMAIL, lambda value, params: True)
        assert engine.validate(applicant) == {}

    def test_validator_receives_params(self, engine, registry, table):
        received = []
        table.register("spy", lambda value, params: received.append((value, params)) or True)

        applicant = Applicant()
        define_field(applicant, "a", 1, [{"type": "spy", "message": "x", "params": {"k": "v"}}], registry=registry)
        define_field(applicant, "b", 2, [{"type": "spy", "message": "x"}], registry=registry)
        engine.validate(applicant)

        assert received == [(1, {"k": "v"}), (2, {})]

    def test_custom_validator_exception_propagates(self, engine, registry, table):
        def explode(value, params):
            raise RuntimeError("boom")

        table.register("explode", explode)
        applicant = Applicant()
        define_field(applicant, "a", 1, [{"type": "explode", "message": "x"}], registry=registry)

        with pytest.raises(RuntimeError, match="boom"):
            engine.validate(applicant)

    def test_validate_does_not_mutate_instance(self, engine, registry):
        applicant = Applicant()
        define_field(applicant, "tags", ["a", "a"], [
            {"type": UNIQUE_ELEMENTS, "message": "dup"}
        ], registry=registry)

        engine.validate(applicant)
        assert vars(applicant) == {"tags": ["a", "a"]}

    def test_validate_batch(self, engine, registry):
        valid = Applicant()
        define_field(valid, "age", 30, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)
        invalid = Applicant()
        invalid.age = 12

        assert engine.validate_batch([valid, invalid]) == [{}, {"age": ["too young"]}]

    def test_isolated_engines_do_not_share_rules(self, registry, table):
        applicant = Applicant()
        define_field(applicant, "age", 16, [
            {"type": MIN, "message": "too young", "params": {"min": 18}}
        ], registry=registry)

        other = ValidationEngine(RuleRegistry(), table, record_metrics=False)

        assert other.validate(applicant) == {}
