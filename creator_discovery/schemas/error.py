"""Error payloads returned by the creator discovery API."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    """Failure categories surfaced to creator search clients."""

    VALIDATION_ERROR = "validation_error"
    DATABASE_ERROR = "database_error"
    TIMEOUT_ERROR = "timeout_error"
    INTERNAL_ERROR = "internal_error"


class ErrorResponse(BaseModel):
    """Envelope for failed creator search and facet requests."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_type": "database_error",
                "message": "Database connection failed",
                "detail": "Unable to load creators. Please try again later.",
                "status_code": 503,
                "timestamp": "2025-11-03T10:30:00Z",
                "request_id": "5d0c9f4e-8d0e-4f55-9d6b-0d4f1f3b2a77",
                "path": "/creators/filters",
                "retry_after": 5,
            }
        }
    )

    error_type: ErrorType = Field(..., description="Category of error")
    message: str = Field(..., description="Human-readable error message")
    detail: str | None = Field(None, description="Additional error details or context")
    status_code: int = Field(..., description="HTTP status code")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When error occurred"
    )
    request_id: str | None = Field(
        None, description="Value of the X-Request-ID response header"
    )
    path: str | None = Field(None, description="Request path that caused the error")
    retry_after: int | None = Field(
        None, description="Seconds to wait before retrying when the store is unavailable"
    )


class ValidationErrorDetail(BaseModel):
    """One rejected creator search parameter."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "query.per_page",
                "message": "Input should be greater than 0",
                "value": "0",
            }
        }
    )

    field: str = Field(..., description="Dotted location, e.g. query.followers_from")
    message: str = Field(..., description="Validation error message")
    value: Any = Field(None, description="Value that failed validation")


class ValidationErrorResponse(ErrorResponse):
    """Error envelope listing every rejected search parameter."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_type": "validation_error",
                "message": "Invalid creator search parameters",
                "detail": "1 validation error(s)",
                "status_code": 422,
                "timestamp": "2025-11-03T10:30:00Z",
                "request_id": "5d0c9f4e-8d0e-4f55-9d6b-0d4f1f3b2a77",
                "path": "/creators",
                "errors": [
                    {
                        "field": "query",
                        "message": "followers_from and followers_to must be provided together",
                        "value": None,
                    },
                ],
            }
        }
    )

    error_type: ErrorType = Field(default=ErrorType.VALIDATION_ERROR)
    errors: list[ValidationErrorDetail] = Field(
        default_factory=list, description="Rejected query parameters"
    )
