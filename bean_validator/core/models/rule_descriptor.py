"""
RuleDescriptor model declaring one check for one field.
"""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, Field


class RuleDescriptor(BaseModel):
    """
    A single validation rule attached to a field.

    Attributes:
        type: Rule-type name; resolved against the validator table when the
            instance is validated, not when the rule is defined
        message: Literal text reported when the rule fails
        params: Validator-specific configuration (e.g. {"min": 18})
    """

    type: str = Field(..., min_length=1)
    message: str
    params: dict[str, Any] | None = None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "type": "min",
                "message": "Must be at least 18",
                "params": {"min": 18}
            }
        }

    @classmethod
    def coerce(cls, rule: "RuleLike") -> "RuleDescriptor":
        """
        Normalize a descriptor or a plain mapping to a RuleDescriptor.

        Raises:
            TypeError: If rule is neither a RuleDescriptor nor a mapping
            pydantic.ValidationError: If the mapping is not a valid descriptor
        """
        if isinstance(rule, cls):
            return rule
        if isinstance(rule, Mapping):
            return cls.model_validate(dict(rule))
        raise TypeError(f"Rule must be a RuleDescriptor or a mapping, got {type(rule).__name__}")


RuleLike = Union[RuleDescriptor, Mapping[str, Any]]
