"""
ErrorResponse model: the client-facing envelope for validation failures.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from bean_validator.core.validators.errors import ValidationFailed


class ErrorResponse(BaseModel):
    """
    Error envelope returned to a client whose payload failed validation.

    Attributes:
        path: Request path (or input location) that was validated
        status: Status code to report
        errors: Field name -> failure messages, as returned by validate()
        timestamp: When the response was built (UTC)
    """

    path: str
    status: int = Field(400, ge=400, le=599)
    errors: dict[str, list[str]]
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("errors")
    @classmethod
    def check_errors_not_empty(cls, v):
        """An error response must carry at least one failing field."""
        if not v:
            raise ValueError("errors must contain at least one field")
        return v

    @classmethod
    def from_failure(cls, path: str, failure: ValidationFailed, status: int = 400) -> "ErrorResponse":
        """Build a response from a ValidationFailed raised by ensure_valid()."""
        return cls(path=path, status=status, errors=failure.errors)

    class Config:
        json_schema_extra = {
            "example": {
                "path": "/api/user",
                "status": 400,
                "errors": {
                    "name": ["Name is required"],
                    "email": ["Invalid email"]
                },
                "timestamp": "2025-11-17T10:00:00Z"
            }
        }
