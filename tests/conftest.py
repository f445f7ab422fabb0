"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from railcat.core.database import Base, get_db
from railcat.core.permissions import (
    ADD_CONTENT,
    DELETE_CONTENT,
    MANAGE_ROLES,
    VERIFY_CONTENT,
)
from railcat.main import create_app

# Import all models to ensure they're registered with Base.metadata
from railcat.modules.catalog import models  # noqa: F401
from tests.factories.tokens import create_test_token


# In-memory SQLite shared by every connection of one engine
TEST_DATABASE_URL = "sqlite+aiosqlite://"


def _enable_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for tests.

    Every test gets a fresh in-memory database, so nothing needs to be
    rolled back between tests.
    """
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Token Fixtures
# ============================================================


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Build Authorization headers for a token granting the given permissions.

    Pass ``permissions=`` to put a raw value in the claim instead.
    """

    def _auth_headers(*names: str, **claims: Any) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_test_token(*names, **claims)}"}

    return _auth_headers


@pytest.fixture
def reader_headers(auth_headers) -> dict[str, str]:
    """Headers for a signed-in user with no permissions (claim 0)."""
    return auth_headers()


@pytest.fixture
def editor_headers(auth_headers) -> dict[str, str]:
    """Headers for a user who may add content."""
    return auth_headers(ADD_CONTENT)


@pytest.fixture
def moderator_headers(auth_headers) -> dict[str, str]:
    """Headers for a user who may add, verify and delete content."""
    return auth_headers(ADD_CONTENT, VERIFY_CONTENT, DELETE_CONTENT)


@pytest.fixture
def admin_headers(auth_headers) -> dict[str, str]:
    """Headers for a user holding every permission."""
    return auth_headers(ADD_CONTENT, VERIFY_CONTENT, DELETE_CONTENT, MANAGE_ROLES)
