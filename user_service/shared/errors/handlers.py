"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients outside
development. All error responses use the envelope:

    {"error": {"message": ..., "statusCode": ..., "code": ..., "details": ...}}
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_service.domain.users.errors import (
    ConflictError,
    NotFoundError,
    UserDomainError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_405 = 405
HTTP_409 = 409
HTTP_429 = 429
HTTP_500 = 500

_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


def error_response(
    status_code: int,
    message: str,
    code: str,
    details: Optional[Any] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build a consistent JSON error envelope."""
    body: dict[str, Any] = {
        "message": message,
        "statusCode": status_code,
        "code": code,
    }
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body}, headers=headers)


def _field_name(loc: tuple) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def validation_details(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``[{field, message}]``, one per failure."""
    return [
        {"field": _field_name(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
        for err in exc.errors()
    ]


def register_error_handlers(app: FastAPI, expose_internal_errors: bool = False) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        expose_internal_errors: Include the real message of unexpected
            errors in the response. Only enable in development.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies and parameters."""
        details = validation_details(exc)
        logger.warning(
            "Request validation failed: %s %s fields=%s",
            request.method,
            request.url.path,
            [d["field"] for d in details],
        )
        return error_response(HTTP_400, "Validation failed", ValidationError.code, details)

    @app.exception_handler(ValidationError)
    async def handle_domain_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle invariant violations reported by the domain."""
        logger.warning("Domain validation failed: field=%s", exc.field)
        return error_response(HTTP_400, exc.message, exc.code, exc.details)

    @app.exception_handler(ConflictError)
    async def handle_conflict(_request: Request, exc: ConflictError) -> JSONResponse:
        """Handle duplicate email errors."""
        logger.warning("User conflict: email already registered")
        return error_response(HTTP_409, exc.message, exc.code)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        """Handle missing user errors."""
        logger.warning("User not found: %s", exc.user_id)
        return error_response(HTTP_404, exc.message, exc.code)

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Catch-all for unclassified users domain errors."""
        logger.error("Unhandled users domain error: %s", exc.message)
        message = exc.message if expose_internal_errors else "Internal server error"
        return error_response(HTTP_500, message, "INTERNAL_ERROR")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors (unknown path, wrong method) and explicit HTTP errors."""
        if exc.status_code == HTTP_404:
            logger.warning("404 Not Found: %s %s", request.method, request.url.path)
            return error_response(
                HTTP_404,
                f"Route {request.method} {request.url.path} not found",
                "NOT_FOUND",
                headers=exc.headers,
            )
        if exc.status_code == HTTP_405:
            return error_response(
                HTTP_405,
                f"Method {request.method} not allowed for {request.url.path}",
                "METHOD_NOT_ALLOWED",
                headers=exc.headers,
            )
        if exc.status_code == HTTP_429:
            return error_response(
                HTTP_429, str(exc.detail), "RATE_LIMIT_EXCEEDED", headers=exc.headers
            )
        return error_response(exc.status_code, str(exc.detail), "HTTP_ERROR", headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals outside development."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        if expose_internal_errors:
            return error_response(
                HTTP_500,
                str(exc) or "Internal server error",
                "INTERNAL_ERROR",
                {"exception": type(exc).__name__},
            )
        return error_response(HTTP_500, "Internal server error", "INTERNAL_ERROR")
