"""
FoodHub Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set BEFORE anything from foodhub is
       imported, so the settings singleton, the engine and the upload
       directory all point at throwaway locations.

Fixture Hierarchy:
    Unit tests (no database):
    ├── mock_db_session: AsyncMock standing in for AsyncSession
    ├── temp_uploads:    fresh upload directory per test
    └── sample_image_bytes

    API tests (real SQLite database via aiosqlite):
    ├── db_tables:     drop_all + create_all around each test
    ├── test_client:   httpx AsyncClient on the ASGI app
    ├── registered_user
    └── auth_headers:  Authorization header for registered_user
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

_TEST_ROOT = tempfile.mkdtemp(prefix="foodhub_test_")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_ROOT}/test.db"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["BCRYPT_ROUNDS"] = "4"  # minimum cost keeps hashing fast
os.environ["RATE_LIMIT_REQUESTS"] = "100000"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Unit Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_food(mock_db_session):
            mock_db_session.get.return_value = None
            with pytest.raises(NotFoundError):
                await food_service.get_food(mock_db_session, uuid4())
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def temp_uploads(tmp_path):
    uploads = tmp_path / "uploads"
    uploads.mkdir()
    return str(uploads)


@pytest.fixture
def sample_image_bytes():
    """Smallest well-formed JPEG: SOI + JFIF APP0 + EOI."""
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )


# ══════════════════════════════════════════════════════════════════════════
# API Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_tables():
    """Fresh schema for every API test."""
    import foodhub.models  # noqa: F401  registers tables on Base.metadata
    from foodhub.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTPX AsyncClient wired straight to the ASGI app.

    The lifespan does not run under ASGITransport; nothing the tests need
    depends on it.
    """
    from foodhub.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def user_payload():
    return {
        "username": "ann",
        "email": "ann@example.com",
        "password": "secret1",
        "firstName": "Ann",
        "lastName": "Lee",
    }


@pytest_asyncio.fixture
async def registered_user(test_client, user_payload):
    response = await test_client.post("/api/users", json=user_payload)
    assert response.status_code == 201, response.text
    return response.json()["user"]


@pytest_asyncio.fixture
async def auth_headers(test_client, registered_user, user_payload):
    response = await test_client.post(
        "/api/login",
        json={"email": user_payload["email"], "password": user_payload["password"]},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
