"""
Validator catalog, validator table and rule-type constants.
"""

from . import rule_types
from .builtin import BUILTIN_VALIDATORS, Validator
from .errors import ValidationFailed, ValidatorNotFound
from .table import ValidatorTable

__all__ = [
    "BUILTIN_VALIDATORS",
    "Validator",
    "ValidatorTable",
    "ValidatorNotFound",
    "ValidationFailed",
    "rule_types",
]
