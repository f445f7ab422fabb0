"""Database layer - session management, base models, and mixins."""

from railcat.core.database.base import Base, TimestampMixin, UUIDMixin, VerifiedMixin
from railcat.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "VerifiedMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
