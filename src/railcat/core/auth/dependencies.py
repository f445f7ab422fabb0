"""FastAPI dependencies for bearer token verification.

Catalog reads are public; only handlers that write (or that describe the
caller) depend on ``CurrentToken``.
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from railcat.core.auth.backend import decode_token
from railcat.core.auth.schemas import TokenData
from railcat.core.errors import UnauthorizedError


# auto_error=False so a missing header becomes our own 401 problem response
bearer_scheme = HTTPBearer(auto_error=False)

Credentials = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


async def get_token_data(request: Request, credentials: Credentials) -> TokenData:
    """Verify the bearer token of the request.

    The permissions claim is not inspected here; the route's permission
    guard decides what the caller may do.

    Raises:
        UnauthorizedError: If no token is sent, or it fails verification
    """
    if credentials is None:
        raise UnauthorizedError("Missing authentication token", error_code="missing_token")

    token_data = decode_token(credentials.credentials)
    if token_data is None:
        raise UnauthorizedError("Invalid or expired token", error_code="invalid_token")

    request.state.subject = token_data.subject
    structlog.contextvars.bind_contextvars(subject=token_data.subject)
    return token_data


CurrentToken = Annotated[TokenData, Depends(get_token_data)]
