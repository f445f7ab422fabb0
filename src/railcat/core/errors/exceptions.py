"""Exception hierarchy for the catalog API.

Every exception carries an HTTP status and a stable ``error_code``; the
handlers in ``railcat.core.errors.handlers`` render them as Problem
Details. Anything in ``details`` is copied into the response body.
"""

from typing import Any


class AppException(Exception):
    """Base class for errors the API reports to clients.

    Attributes:
        message: Human-readable explanation, sent as ``detail``
        error_code: Machine-readable code clients can branch on
        status_code: HTTP status of the response
        details: Extra members merged into the response body
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message is not None:
            self.message = message
        if error_code is not None:
            self.error_code = error_code
        self.details = dict(details or {})
        super().__init__(self.message)


class BadRequestError(AppException):
    message = "Bad request"
    error_code = "bad_request"
    status_code = 400


class UnauthorizedError(AppException):
    """The request carries no bearer token, or one that does not verify."""

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class NotFoundError(AppException):
    """A catalog record (or a record it references) does not exist.

    Example:
        raise NotFoundError("Owner not found", resource="owner", resource_id=str(owner_id))
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        details = dict(details or {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message, details=details, **kwargs)


class ConflictError(AppException):
    """A write would break a uniqueness rule, such as two tags with one name."""

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class ValidationError(AppException):
    """A request is well-formed but its values are not acceptable.

    Example:
        raise ValidationError("Invalid update", errors=[{"field": "number", "message": "..."}])
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        details = dict(details or {})
        if errors:
            details["errors"] = errors
        super().__init__(message, details=details, **kwargs)


# ============================================================
# Permission Errors
# ============================================================


class InvalidInputError(BadRequestError):
    """An encoded permission set is missing, not an integer, or negative."""

    message = "Permission value must be a non-negative integer"
    error_code = "invalid_input"


class UnknownPermissionError(ValidationError):
    """A permission name is not in the registry.

    Example:
        raise UnknownPermissionError("Unknown permission: PUBLISH", details={"permission": "PUBLISH"})
    """

    message = "Unknown permission"
    error_code = "unknown_permission"


class AuthorizationDenied(ForbiddenError):
    """The caller's permission set does not allow the requested write.

    Also raised when the permissions claim cannot be decoded, so a bad
    claim never grants access.
    """

    message = "Not allowed to perform this operation"
    error_code = "authorization_denied"
