"""Root conftest: shared fixtures for every test layer.

Invariants:
    - Tests never touch a real database server: SQL tests use in-memory SQLite
    - Every SQL test gets a fresh in-memory database (one engine per test)
    - Route tests override get_user_service / get_db_manager; the app lifespan never runs

Design Decisions:
    - Two clients: `client` exercises the full stack down to SQLite,
      `fake_client` runs over InMemoryUserRepository so tests can assert which
      repository calls were (not) made
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.api.dependencies import get_db_manager, get_user_service
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.infrastructure.user_repository import SqlUserRepository
from users_api.main import app
from users_api.services.user_service import UserService
from tests.fakes import InMemoryUserRepository

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_repository(db_manager):
    return SqlUserRepository(db_manager)


@pytest.fixture
def fake_repository():
    return InMemoryUserRepository()


@pytest.fixture
def fake_service(fake_repository):
    return UserService(fake_repository)


async def _client_for(service: UserService, db_manager: DatabaseSessionManager | None):
    app.dependency_overrides[get_user_service] = lambda: service
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(db_manager, sql_repository):
    """FastAPI test client over the SQL repository and in-memory SQLite."""
    async for c in _client_for(UserService(sql_repository), db_manager):
        yield c


@pytest.fixture
async def fake_client(fake_service):
    """FastAPI test client over InMemoryUserRepository (no database)."""
    async for c in _client_for(fake_service, None):
        yield c
