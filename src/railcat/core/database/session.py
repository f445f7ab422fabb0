"""Async engine and per-request sessions for the catalog database."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from railcat.config import Settings, settings


def build_engine(config: Settings) -> AsyncEngine:
    """Create the pooled asyncpg engine described by the settings."""
    return create_async_engine(
        config.async_database_url,
        pool_size=config.database_pool_size,
        max_overflow=config.database_max_overflow,
        echo=config.database_echo,
        pool_pre_ping=True,
    )


async_engine = build_engine(settings)

async_session_factory = async_sessionmaker(
    bind=async_engine,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session whose work is committed only if the request succeeds."""
    async with async_session_factory() as session, session.begin():
        yield session
