"""Problem Details (RFC 7807) rendering for every error the API returns.

Clients tell failures apart by ``status`` and ``error_code``: a denied
write is 403 ``authorization_denied``, a malformed request 400 or 422, a
server fault 500.
"""

from typing import TYPE_CHECKING, Any, cast

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from sqlalchemy.exc import IntegrityError

from railcat.config import settings
from railcat.core.errors.exceptions import AppException, ForbiddenError


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


logger = structlog.get_logger()

UNPROCESSABLE_STATUS = 422


class FieldError(BaseModel):
    field: str
    message: str
    type: str | None = None


class ProblemDetail(BaseModel):
    """Problem Details body.

    Attributes:
        type: Documentation URI for the error code
        title: Error code in words
        status: HTTP status code
        detail: Explanation of this occurrence
        instance: Request path
        error_code: Machine-readable error code
        errors: Field errors, for validation failures
        trace_id: The X-Request-ID of the request
    """

    model_config = ConfigDict(extra="allow")

    type: str
    title: str
    status: int
    detail: str
    instance: str | None = None
    error_code: str | None = None
    errors: list[FieldError] | None = None
    trace_id: str | None = None


def problem_response(
    request: Request,
    status_code: int,
    error_code: str,
    detail: str,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build a Problem Details response; ``extra`` never overrides standard members."""
    problem = ProblemDetail(
        type=f"{settings.api_docs_base_url}/errors/{error_code}",
        title=error_code.replace("_", " ").capitalize(),
        status=status_code,
        detail=detail,
        instance=request.url.path,
        error_code=error_code,
        trace_id=getattr(request.state, "request_id", None),
    )
    content = problem.model_dump(exclude_none=True)
    for key, value in (extra or {}).items():
        content.setdefault(key, value)

    return JSONResponse(status_code=status_code, content=content)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    # Denials are worth noticing; other client errors are routine
    log = logger.warning if isinstance(exc, ForbiddenError) else logger.info
    log(
        "app_exception",
        error_code=exc.error_code,
        status_code=exc.status_code,
        path=request.url.path,
        message=exc.message,
    )
    return problem_response(
        request, exc.status_code, exc.error_code, exc.message, extra=exc.details
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report every failing field of a rejected request."""
    errors = [
        FieldError(
            field=".".join(str(part) for part in error.get("loc", ()) if part != "body")
            or "unknown",
            message=error.get("msg", "Invalid value"),
            type=error.get("type"),
        ).model_dump(exclude_none=True)
        for error in exc.errors()
    ]

    logger.info("validation_error", path=request.url.path, error_count=len(errors))

    return problem_response(
        request,
        UNPROCESSABLE_STATUS,
        "validation_error",
        "Request validation failed",
        extra={"errors": errors},
    )


async def integrity_exception_handler(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Constraint violations that got past the service checks, such as a race on a tag name."""
    logger.warning("integrity_error", path=request.url.path, error=str(exc.orig))

    return problem_response(
        request,
        status.HTTP_409_CONFLICT,
        "conflict",
        "The request conflicts with existing catalog data",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure in full and tell the client nothing about it."""
    logger.exception(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
    )

    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    handlers: dict[type[Exception], Any] = {
        AppException: app_exception_handler,
        RequestValidationError: validation_exception_handler,
        IntegrityError: integrity_exception_handler,
        Exception: unhandled_exception_handler,
    }
    for exc_class, handler in handlers.items():
        app.add_exception_handler(exc_class, cast("ExceptionHandler", handler))
