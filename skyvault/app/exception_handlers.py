"""Global exception handlers for the FastAPI application.

Every error leaves the service as an RFC 7807 problem-details body with the
request ID attached when one is known.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skyvault.core.database.exceptions import NotFoundError
from skyvault.core.exceptions import AppException, InvalidCursorException, NotFoundException
from skyvault.core.schemas.problem_details import (
    FieldError,
    ProblemDetails,
    ValidationProblemDetails,
)

logger = logging.getLogger(__name__)

_PROBLEM_JSON = "application/problem+json"


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _problem_response(
    request: Request,
    problem: ProblemDetails,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    content = problem.model_dump(exclude_none=True)
    if extra:
        content.update(extra)
    request_id = _get_request_id(request)
    if request_id:
        content["request_id"] = request_id
    return JSONResponse(
        status_code=problem.status,
        content=jsonable_encoder(content),
        media_type=_PROBLEM_JSON,
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert an ``AppException`` into a problem-details response."""
    log_extra = {
        "request_id": _get_request_id(request),
        "path": request.url.path,
        "method": request.method,
        "exception_type": exc.type,
        "status_code": exc.status_code,
        "detail": exc.detail,
    }
    if isinstance(exc, InvalidCursorException):
        logger.warning("Rejected pagination cursor", extra=log_extra)
    elif exc.status_code >= 500:
        logger.error("Application exception occurred", extra=log_extra)
    else:
        logger.info("Application exception occurred", extra=log_extra)

    problem = ProblemDetails(
        type=exc.type,
        title=exc.title,
        status=exc.status_code,
        detail=exc.detail,
        instance=exc.instance or str(request.url),
    )
    return _problem_response(request, problem, exc.extra)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Render a repository lookup miss as a 404 problem."""
    resource = re.sub(r"(?<!^)(?=[A-Z])", "-", exc.model_name).lower()
    return await app_exception_handler(
        request,
        NotFoundException(
            detail=exc.message,
            type=f"{resource}-not-found",
            extra={key: str(value) for key, value in exc.identifier.items()},
        ),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert request validation failures into a 422 with field-level errors."""
    errors = [
        FieldError(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            type=error["type"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "request_id": _get_request_id(request),
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
        },
    )

    problem = ValidationProblemDetails(
        type="validation-error",
        title="Validation Error",
        status=422,
        detail=f"Request validation failed for {len(errors)} field(s)",
        instance=str(request.url),
        errors=errors,
    )
    return _problem_response(request, problem)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the traceback and return an opaque 500."""
    logger.error(
        "Unexpected exception occurred",
        extra={
            "request_id": _get_request_id(request),
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
        },
        exc_info=exc,
    )

    problem = ProblemDetails(
        type="internal-error",
        title="Internal Server Error",
        status=500,
        detail="An unexpected error occurred while processing your request",
        instance=str(request.url),
    )
    return _problem_response(request, problem)


def configure_exception_handlers(app: FastAPI) -> None:
    """Register all problem-details exception handlers on ``app``."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    logger.debug("Exception handlers configured")
