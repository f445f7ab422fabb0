"""Permission guards for mutation routes.

Routes declare the permission a write needs; the guard decodes the
caller's permissions claim and rejects the request before the handler
runs. Any problem with the claim itself is treated as a denial.

Usage:
    @router.delete("/{record_id}")
    @require_permission(DELETE_CONTENT)
    async def delete_record(record_id: UUID, token: CurrentToken):
        ...
"""

from collections.abc import Awaitable, Callable, Iterable
from functools import wraps
from typing import ParamSpec, TypeVar, cast

import structlog

from railcat.core.auth.schemas import TokenData
from railcat.core.errors import AuthorizationDenied, InvalidInputError
from railcat.core.permissions.codec import PermissionCodec, get_permission_codec


logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")


def _granted_permissions(token: TokenData, codec: PermissionCodec) -> set[str]:
    try:
        return set(codec.decode(token.permissions))
    except InvalidInputError as exc:
        logger.warning(
            "invalid_permission_claim",
            subject=token.subject,
            details=exc.details,
        )
        raise AuthorizationDenied(
            "Token does not carry a valid permission set",
            details={"reason": exc.error_code},
        ) from exc


def ensure_permissions(
    token: TokenData | None,
    names: Iterable[str],
    require_all: bool = True,
    codec: PermissionCodec | None = None,
) -> set[str]:
    """Check a token against required permissions.

    Args:
        token: Verified token data of the caller
        names: Required permission names
        require_all: If True, every name is needed; if False, any one
        codec: Codec to decode with (defaults to the process codec)

    Returns:
        The set of permissions granted by the token

    Raises:
        AuthorizationDenied: If the check fails or the claim is malformed
        UnknownPermissionError: If a required name is not registered
    """
    codec = codec or get_permission_codec()
    required = list(names)
    # Reject unregistered requirements before looking at the token
    codec.encode(required)

    if token is None:
        raise AuthorizationDenied(
            "Authentication required",
            details={"required_permissions": required},
        )

    granted = _granted_permissions(token, codec)
    check = all if require_all else any
    if not check(name in granted for name in required):
        logger.warning(
            "permission_denied",
            subject=token.subject,
            required=required,
            granted=sorted(granted),
            require_all=require_all,
        )
        if require_all:
            message = f"Missing required permissions: {', '.join(required)}"
        else:
            message = f"Missing required permission. Need one of: {', '.join(required)}"
        raise AuthorizationDenied(message, details={"required_permissions": required})

    return granted


def ensure_permission(
    token: TokenData | None,
    name: str,
    codec: PermissionCodec | None = None,
) -> None:
    """Check a token for a single permission."""
    ensure_permissions(token, [name], require_all=True, codec=codec)


def _guard(
    names: list[str], require_all: bool
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    # Fail at import time for misspelled permission names
    get_permission_codec().encode(names)

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            token = cast("TokenData | None", kwargs.get("token"))
            ensure_permissions(token, names, require_all=require_all)
            return await func(*args, **kwargs)

        return wrapper

    return decorator


def require_permission(
    name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires a specific permission to access a route.

    The decorated handler must accept a ``token: CurrentToken`` parameter.

    Raises:
        AuthorizationDenied: If the caller lacks the permission
    """
    return _guard([name], require_all=True)


def require_any_permission(
    names: list[str],
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires any one of the specified permissions."""
    return _guard(list(names), require_all=False)


def require_all_permissions(
    names: list[str],
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires all of the specified permissions."""
    return _guard(list(names), require_all=True)
