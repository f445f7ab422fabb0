"""Authentication module for bearer token verification."""

from railcat.core.auth.backend import decode_token
from railcat.core.auth.dependencies import (
    CurrentToken,
    get_token_data,
)
from railcat.core.auth.middleware import RequestIdMiddleware
from railcat.core.auth.schemas import TokenData


__all__ = [
    # Dependencies
    "CurrentToken",
    # Middleware
    "RequestIdMiddleware",
    # Schemas
    "TokenData",
    # Token utilities
    "decode_token",
    "get_token_data",
]
