"""
bean-validator: declarative field validation for data-transfer objects.

Attach rules to fields in a constructor with define_field(), then call
validate() whenever the object needs checking:

    from bean_validator import define_field, validate, NOT_EMPTY, EMAIL

    class UserDTO:
        def __init__(self, name, email):
            define_field(self, "name", name, [
                {"type": NOT_EMPTY, "message": "Name is required"}
            ])
            define_field(self, "email", email, [
                {"type": EMAIL, "message": "Invalid email"}
            ])

    validate(UserDTO("", "invalid@"))
    # {"name": ["Name is required"], "email": ["Invalid email"]}
"""

from bean_validator.core.models import ErrorResponse, RuleDescriptor
from bean_validator.core.rules import (
    RuleConfigLoader,
    RuleRegistry,
    RuleSetBuilder,
    ValidationEngine,
    parse_rule_config,
)
from bean_validator.core.validators import ValidationFailed, ValidatorNotFound, ValidatorTable
from bean_validator.core.validators.rule_types import (
    BUILTIN_RULE_TYPES,
    CREDIT_CARD_NUMBER,
    CURRENCY,
    DIGITS,
    EAN,
    EMAIL,
    ISBN,
    LENGTH,
    MAX,
    MIN,
    NOT_BLANK,
    NOT_EMPTY,
    NOT_NULL,
    PATTERN,
    RANGE,
    SIZE,
    UNIQUE_ELEMENTS,
    URL,
)
from bean_validator.service import (
    define_field,
    define_fields,
    ensure_valid,
    register_validator,
    validate,
    validator,
)

__version__ = "1.0.0"

__all__ = [
    "define_field",
    "define_fields",
    "validate",
    "ensure_valid",
    "register_validator",
    "validator",
    "ValidatorTable",
    "RuleRegistry",
    "ValidationEngine",
    "RuleDescriptor",
    "ErrorResponse",
    "ValidatorNotFound",
    "ValidationFailed",
    "RuleConfigLoader",
    "RuleSetBuilder",
    "parse_rule_config",
    "BUILTIN_RULE_TYPES",
    "NOT_NULL",
    "NOT_EMPTY",
    "NOT_BLANK",
    "EMAIL",
    "PATTERN",
    "MIN",
    "MAX",
    "RANGE",
    "SIZE",
    "LENGTH",
    "DIGITS",
    "CREDIT_CARD_NUMBER",
    "UNIQUE_ELEMENTS",
    "URL",
    "CURRENCY",
    "EAN",
    "ISBN",
]
