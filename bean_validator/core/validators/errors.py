"""
Exceptions raised by the validation engine.
"""


class ValidatorNotFound(LookupError):
    """
    Raised when a rule references a rule type missing from the validator table.

    This is a configuration defect (a typo in a rule type, or a custom
    validator that was never registered), not a validation failure.
    """

    def __init__(self, rule_type: str, field_name: str | None = None):
        self.rule_type = rule_type
        self.field_name = field_name
        location = f" (field '{field_name}')" if field_name else ""
        super().__init__(f"Validator '{rule_type}' not found{location}")


class ValidationFailed(Exception):
    """Raised by ensure_valid() when an instance has validation errors."""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        fields = ", ".join(errors)
        super().__init__(f"Validation failed for fields: {fields}")
