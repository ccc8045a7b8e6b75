"""Error responses for the HTTP API.

Every error leaves the API in the same envelope:

    {
        "success": false,
        "error": {"message": ..., "code": ..., "status_code": ..., "context": ...},
        "timestamp": ...,
        "path": ...,
        "method": ...
    }
"""

from datetime import datetime
from enum import Enum
from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from remark.config import Settings
from remark.domain.error import NotFoundError


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    HTTP_ERROR = "HTTP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def error_response(
    request: Request,
    status_code: int,
    code: ErrorCode,
    message: str,
    context: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build the error envelope."""
    error: dict[str, Any] = {
        "message": message,
        "code": code.value,
        "status_code": status_code,
    }
    if context is not None:
        error["context"] = context

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "timestamp": datetime.now().isoformat(),
            "path": request.url.path,
            "method": request.method,
        },
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Map domain and framework errors to the error envelope.

    - NotFoundError -> 404
    - Request validation errors -> 400
    - Other HTTP errors (unknown route, wrong method) keep their status
    - Anything else -> 500, with the message hidden in production

    Args:
        app: FastAPI application
        settings: Application settings
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logfire.warn(
            "Resource not found",
            resource=exc.resource,
            identifier=exc.identifier,
            path=request.url.path,
        )
        return error_response(
            request,
            status.HTTP_404_NOT_FOUND,
            ErrorCode.RESOURCE_NOT_FOUND,
            str(exc),
            context={"resource": exc.resource, "field": "id", "value": exc.identifier},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": error.get("msg", ""),
                "type": error.get("type", ""),
            }
            for error in exc.errors()
        ]
        logfire.warn("Request validation failed", path=request.url.path, errors=errors)
        return error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            ErrorCode.VALIDATION_ERROR,
            "Validation failed",
            context={"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            code = ErrorCode.NOT_FOUND
            message = f"Route {request.url.path} not found"
        else:
            code = ErrorCode.HTTP_ERROR
            message = str(exc.detail)
        return error_response(request, exc.status_code, code, message)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
            _exc_info=exc,
        )
        message = (
            "An unexpected error occurred" if settings.is_production else str(exc)
        )
        return error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.INTERNAL_ERROR,
            message,
        )
