"""
Public validation service: field definition, validation and validator
registration against the process-wide defaults.

The default validator table is seeded with the built-in catalog when this
module is imported and is only ever extended through register_validator().
Register custom validators during application startup, before requests are
validated concurrently. Every entry point also accepts an explicit table,
registry or engine so tests and embedders can work in isolation.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from bean_validator.core.models import RuleLike
from bean_validator.core.rules import RuleRegistry, ValidationEngine, ValidationResult
from bean_validator.core.validators import Validator, ValidationFailed, ValidatorTable
from bean_validator.observability import metrics

T = TypeVar("T")

default_table = ValidatorTable.with_builtins()
default_registry = RuleRegistry()
default_engine = ValidationEngine(default_registry, default_table)

metrics.registered_validators.set(len(default_table))


def define_field(
    instance: Any,
    field_name: str,
    initial_value: Any,
    rules: Iterable[RuleLike] | None = None,
    *,
    registry: RuleRegistry | None = None,
) -> None:
    """
    Define a field on an instance and register its validation rules.

    Meant to be called from a DTO constructor. The rules are stored once per
    class and shared by every instance; calling it again for the same field
    replaces both the rule list and the value.

    Args:
        instance: The object being constructed (usually `self`)
        field_name: Name of the field to define
        initial_value: Value assigned to the field
        rules: Rule descriptors or mappings with "type", "message" and
            optional "params"
        registry: Registry to store the rules in (default: process-wide)

    Example:
        class UserDTO:
            def __init__(self, name, email):
                define_field(self, "name", name, [
                    {"type": NOT_EMPTY, "message": "Name is required"}
                ])
                define_field(self, "email", email, [
                    {"type": EMAIL, "message": "Invalid email"}
                ])
    """
    registry = default_registry if registry is None else registry
    registry.add_rule(type(instance), field_name, rules or [])
    setattr(instance, field_name, initial_value)


def define_fields(
    instance: Any,
    values: Mapping[str, Any],
    rule_set: Mapping[str, Iterable[RuleLike]],
    *,
    registry: RuleRegistry | None = None,
) -> None:
    """
    Define every field of a rule set, taking values by field name.

    Fields missing from values are defined as None so their rules still run.
    """
    for field_name, rules in rule_set.items():
        define_field(instance, field_name, values.get(field_name), rules, registry=registry)


def validate(instance: Any, *, engine: ValidationEngine | None = None) -> ValidationResult:
    """
    Validate an instance against the rules registered for its class.

    Returns:
        Field name -> failure messages; empty when valid

    Raises:
        ValidatorNotFound: If a rule references an unregistered rule type
    """
    engine = default_engine if engine is None else engine
    return engine.validate(instance)


def ensure_valid(instance: T, *, engine: ValidationEngine | None = None) -> T:
    """
    Return the instance if it is valid.

    Raises:
        ValidationFailed: If validation produced any errors
        ValidatorNotFound: If a rule references an unregistered rule type
    """
    errors = validate(instance, engine=engine)
    if errors:
        raise ValidationFailed(errors)
    return instance


def register_validator(name: str, fn: Validator, *, table: ValidatorTable | None = None) -> None:
    """
    Register a custom validator, replacing any existing one with that name.

    Args:
        name: Rule-type name used in rule descriptors
        fn: Predicate taking (value, params) and returning True when valid
        table: Table to register into (default: process-wide)

    Example:
        register_validator("startsWithA", lambda value, params: str(value).startswith("A"))
    """
    if table is None:
        default_table.register(name, fn)
        metrics.registered_validators.set(len(default_table))
    else:
        table.register(name, fn)


def validator(name: str, *, table: ValidatorTable | None = None) -> Callable[[Validator], Validator]:
    """
    Decorator form of register_validator().

        @validator("startsWithA")
        def starts_with_a(value, params):
            return isinstance(value, str) and value.startswith("A")
    """
    def decorator(fn: Validator) -> Validator:
        register_validator(name, fn, table=table)
        return fn
    return decorator
