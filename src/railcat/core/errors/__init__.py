"""Error handling module with RFC 7807 Problem Details."""

from railcat.core.errors.exceptions import (
    AppException,
    AuthorizationDenied,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
    UnknownPermissionError,
    ValidationError,
)
from railcat.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "AuthorizationDenied",
    "BadRequestError",
    "ConflictError",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "InvalidInputError",
    "NotFoundError",
    "ProblemDetail",
    "UnauthorizedError",
    "UnknownPermissionError",
    "ValidationError",
    "register_exception_handlers",
]
