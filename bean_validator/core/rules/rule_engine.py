"""
Validation engine: re-checks every registered field of an instance.

The engine reads the rule set for the instance's class from the rule
registry, runs each rule's validator from the validator table against the
field's current value, and collects the messages of failing rules.
"""

from contextlib import nullcontext
from typing import Any

from bean_validator.core.validators import ValidatorNotFound, ValidatorTable
from bean_validator.observability import metrics
from bean_validator.observability.logger import get_logger

from .registry import RuleRegistry

logger = get_logger(__name__)

ValidationResult = dict[str, list[str]]


class ValidationEngine:
    """
    Validates instances against the rules registered for their class.

    The engine only reads the registry, the table and the instance; it can
    be shared between threads.
    """

    def __init__(self, registry: RuleRegistry, table: ValidatorTable, record_metrics: bool = True):
        """
        Initialize the engine.

        Args:
            registry: Rule registry to read rule sets from
            table: Validator table used to resolve rule types
            record_metrics: Whether to record Prometheus metrics
        """
        self.registry = registry
        self.table = table
        self.record_metrics = record_metrics

    def validate(self, instance: Any) -> ValidationResult:
        """
        Validate an instance against its registered rules.

        Every rule of every field runs, in definition order; a field appears
        in the result only if at least one of its rules failed.

        Args:
            instance: Object whose fields were defined with define_field()

        Returns:
            Field name -> failure messages; empty when the instance is valid

        Raises:
            ValidatorNotFound: If a rule references an unregistered rule type
        """
        type_key = type(instance)
        type_name = type_key.__name__
        rule_set = self.registry.rules_for(type_key)

        if not rule_set:
            return {}

        errors: ValidationResult = {}
        failures: list[tuple[str, str]] = []

        if self.record_metrics:
            timer = metrics.track_duration(metrics.validation_duration_seconds, type_name=type_name)
        else:
            timer = nullcontext()

        with timer:
            for field_name, rules in rule_set.items():
                value = getattr(instance, field_name, None)

                for rule in rules:
                    fn = self.table.lookup(rule.type)
                    if fn is None:
                        logger.error(
                            f"Validator '{rule.type}' not found",
                            extra={"type_name": type_name, "field_name": field_name, "rule_type": rule.type},
                        )
                        if self.record_metrics:
                            metrics.validator_not_found_total.labels(rule_type=rule.type).inc()
                        raise ValidatorNotFound(rule.type, field_name)

                    if not fn(value, rule.params or {}):
                        errors.setdefault(field_name, []).append(rule.message)
                        failures.append((field_name, rule.type))

        if self.record_metrics:
            metrics.record_validation(type_name, failures)

        logger.debug(
            "Validated instance",
            extra={"type_name": type_name, "fields": len(rule_set), "failed_fields": len(errors)},
        )
        return errors

    def validate_batch(self, instances: list[Any]) -> list[ValidationResult]:
        """Validate a batch of instances, one result per instance."""
        return [self.validate(instance) for instance in instances]
