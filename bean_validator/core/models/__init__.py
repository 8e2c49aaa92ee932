"""
Core data models for bean-validator.

All models use Pydantic for runtime validation and type safety.
"""

from .error_response import ErrorResponse
from .rule_descriptor import RuleDescriptor, RuleLike

__all__ = [
    "RuleDescriptor",
    "RuleLike",
    "ErrorResponse",
]
