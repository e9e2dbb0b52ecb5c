"""API error envelope and exception handler registration."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
import logging
from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.error import ErrorMessage
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


class APIError(Exception):
    """Base application exception for explicit API error responses."""

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        field_errors: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.field_errors = {field: list(issues) for field, issues in field_errors.items()} if field_errors else None


class NotFoundError(APIError):
    """Convenience exception for missing resources."""

    def __init__(self, *, message: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, code="not_found", message=message)


def _build_error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    field_errors: Mapping[str, Sequence[str]] | None = None,
) -> JSONResponse:
    if field_errors:
        payload = ErrorResponse(
            status_code=status_code,
            error_code=code,
            message=message,
            field_errors={
                field: [ErrorMessage(error_code=code, message=issue) for issue in issues]
                for field, issues in field_errors.items()
            },
        )
    else:
        payload = ErrorResponse(
            status_code=status_code,
            error_code=code,
            message=message,
            page_errors=[ErrorMessage(error_code=code, message=message)],
        )
    return JSONResponse(status_code=status_code, content=payload.model_dump(by_alias=True))


def _http_error_code(status_code: int) -> str:
    if status_code == status.HTTP_404_NOT_FOUND:
        return "not_found"
    if status_code == status.HTTP_400_BAD_REQUEST:
        return "validation_error"
    if status_code == status.HTTP_401_UNAUTHORIZED:
        return "unauthorized"
    if status_code == status.HTTP_403_FORBIDDEN:
        return "forbidden"
    if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return "method_not_allowed"
    if status_code == status.HTTP_409_CONFLICT:
        return "conflict"
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return "internal_error"
    return "bad_request"


def _issue_message(issue: Mapping[str, Any]) -> str:
    message = str(issue.get("msg", "Invalid value"))
    if issue.get("type") == "value_error" and message.startswith(VALUE_ERROR_PREFIX):
        return message[len(VALUE_ERROR_PREFIX) :]
    return message


def _validation_field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    field_errors: dict[str, list[str]] = {}
    for issue in exc.errors():
        field = _format_location(issue.get("loc", ()))
        message = _issue_message(issue)
        field_errors.setdefault(field, []).append(message)
    return field_errors


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    prefixes = {"body", "query", "path", "header", "cookie"}
    filtered = [str(part) for part in location if part not in prefixes]
    if filtered:
        return ".".join(filtered)

    if not location:
        return "request"

    return str(location[0])


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to per-field error entries."""

    return _build_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        code="validation_error",
        message="Request validation failed",
        field_errors=_validation_field_errors(exc),
    )


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Normalize HTTP exceptions to the shared envelope."""

    if isinstance(exc.detail, dict) and "message" in exc.detail:
        detail = exc.detail
        return _build_error_response(
            status_code=exc.status_code,
            code=str(detail.get("code", _http_error_code(exc.status_code))),
            message=str(detail["message"]),
        )

    message = str(exc.detail) if isinstance(exc.detail, str) and exc.detail else "Request failed"
    return _build_error_response(
        status_code=exc.status_code,
        code=_http_error_code(exc.status_code),
        message=message,
    )


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Return explicit domain errors in the shared envelope."""

    return _build_error_response(
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        field_errors=exc.field_errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Avoid leaking internal exceptions while keeping response shape stable."""

    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _build_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="internal_error",
        message="Internal server error",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
