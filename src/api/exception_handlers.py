"""Exception handlers for the reference store application.

Every failure leaves the store in one envelope::

    {"error_code": ..., "message": ..., "details": ..., "request_id": ...}

so the profile client can map any non-success reply to a single
user-visible notification without parsing per-route shapes.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware.request_id import REQUEST_ID_HEADER
from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()

# Misses the client expects on every first visit or stale image link.
EXPECTED_MISSES = frozenset({ErrorCode.PROFILE_NOT_FOUND, ErrorCode.UPLOAD_NOT_FOUND})

ROUTING_ERROR_CODES: dict[int, str] = {
    404: "ROUTE_NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: Any | None = None,
) -> ORJSONResponse:
    """Render the store's error envelope, tagged with the request ID."""
    request_id = _request_id(request)
    return ORJSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
        headers={REQUEST_ID_HEADER: request_id},
    )


def _document_field(loc: tuple[Any, ...]) -> tuple[str, str]:
    """Split a pydantic error location into (source, dotted document path)."""
    if loc and loc[0] in ("body", "query", "path"):
        return str(loc[0]), ".".join(str(part) for part in loc[1:])
    return "body", ".".join(str(part) for part in loc)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers that render every error as the same JSON envelope."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> ORJSONResponse:
        if exc.error_code in EXPECTED_MISSES:
            log = logger.info
        elif exc.status_code >= 500:
            log = logger.error
        else:
            log = logger.warning
        log(
            "store_error",
            error_code=exc.error_code.value,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return error_response(
            request, exc.status_code, exc.error_code.value, exc.message, exc.details
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> ORJSONResponse:
        """Routing failures: unknown paths and unsupported methods."""
        return error_response(
            request,
            exc.status_code,
            ROUTING_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            str(exc.detail),
            {"method": request.method, "path": request.url.path},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        """Documents that do not fit the store shape, reported per field."""
        problems = []
        for error in exc.errors():
            source, path = _document_field(tuple(error["loc"]))
            problems.append(
                {"source": source, "field": path, "message": error["msg"], "type": error["type"]}
            )
        logger.info(
            "store_document_rejected",
            path=request.url.path,
            fields=[problem["field"] for problem in problems],
        )
        return error_response(
            request,
            422,
            ErrorCode.VALIDATION_ERROR.value,
            "Document validation failed",
            problems,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        logger.error(
            "store_unhandled_exception",
            error_type=type(exc).__name__,
            path=request.url.path,
            request_id=_request_id(request),
            exc_info=True,
        )
        message = str(exc) if not settings.is_production else "An unexpected error occurred"
        return error_response(request, 500, ErrorCode.INTERNAL_ERROR.value, message)
