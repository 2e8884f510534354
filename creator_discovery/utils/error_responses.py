"""Helper functions for constructing structured API error responses.

Every exception handler in :mod:`creator_discovery.main` goes through these
builders so error payloads always carry the request id and a timezone-aware
timestamp. Creator search parameters that pass FastAPI's per-field checks but
break a cross-field rule (``page`` without ``per_page``, a lone follower
bound) are reported through :func:`creator_query_error` so they reach clients
in the same shape as any other rejected query parameter.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from fastapi.exceptions import RequestValidationError

from creator_discovery.schemas.error import (
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from creator_discovery.utils.request_context import get_request_id

__all__ = [
    "build_error_response",
    "build_validation_error_response",
    "creator_query_error",
    "validation_details",
]


def _current_timestamp() -> datetime:
    """Return a timezone-aware timestamp for error payloads."""

    return datetime.now(UTC)


def creator_query_error(message: str) -> RequestValidationError:
    """Wrap a rejected combination of creator search parameters.

    The location is the query string as a whole because the rule spans
    several parameters.
    """

    return RequestValidationError(
        [
            {
                "type": "value_error",
                "loc": ("query",),
                "msg": message,
                "input": None,
            }
        ]
    )


def validation_details(
    raw_errors: Iterable[Mapping[str, Any]],
) -> list[ValidationErrorDetail]:
    """Flatten pydantic error dicts into ``field``/``message``/``value`` rows.

    ``("query", "per_page")`` becomes ``"query.per_page"``.
    """

    return [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in raw_errors
    ]


def build_validation_error_response(
    *,
    errors: Sequence[ValidationErrorDetail],
    message: str,
    detail: str,
    status_code: int,
    path: str,
    error_type: ErrorType = ErrorType.VALIDATION_ERROR,
    request_id: str | None = None,
) -> ValidationErrorResponse:
    """Construct a ``ValidationErrorResponse`` enriched with metadata."""

    resolved_request_id = request_id or get_request_id()
    return ValidationErrorResponse(
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=resolved_request_id,
        path=path,
        errors=list(errors),
    )


def build_error_response(
    *,
    error_type: ErrorType,
    message: str,
    detail: str,
    status_code: int,
    path: str,
    retry_after: int | None = None,
    request_id: str | None = None,
) -> ErrorResponse:
    """Construct a generic ``ErrorResponse`` enriched with metadata.

    ``retry_after`` is omitted for failures where retrying will not help.
    """

    resolved_request_id = request_id or get_request_id()
    return ErrorResponse(
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=resolved_request_id,
        path=path,
        retry_after=retry_after,
    )
