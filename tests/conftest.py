"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path

# Point settings at SQLite and a fixed signing key before the app is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["GITHUB_CLIENT_ID"] = ""
os.environ["GITHUB_CLIENT_SECRET"] = ""

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.password_hasher import PasswordHasher
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.github.client import GitHubClient

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite://"

GITHUB_REPOS = [
    {"id": 3, "name": "newest", "html_url": "https://github.com/octocat/newest"},
    {"id": 2, "name": "middle", "html_url": "https://github.com/octocat/middle"},
    {"id": 1, "name": "oldest", "html_url": "https://github.com/octocat/oldest"},
]


def github_handler(request: httpx.Request) -> httpx.Response:
    """Stand-in for api.github.com: only ``octocat`` exists."""
    if request.url.path == "/users/octocat/repos":
        return httpx.Response(200, json=GITHUB_REPOS)
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Create a UoW factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher()


@pytest.fixture
def github_client() -> GitHubClient:
    """GitHub client answering from ``github_handler``."""
    return GitHubClient(
        base_url="https://api.github.test",
        transport=httpx.MockTransport(github_handler),
    )


@pytest.fixture
def app(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    auth_provider: JWTAuthProvider,
    password_hasher: PasswordHasher,
    github_client: GitHubClient,
) -> FastAPI:
    """
    Create the application wired to the test database.

    Services are rebuilt around the per-test UoW factory; auth is real, so
    requests must carry tokens issued by ``auth_provider``.
    """
    from api.dependencies.auth import get_auth_provider
    from api.dependencies.services import (
        get_github_client,
        get_post_service,
        get_profile_service,
        get_user_service,
    )
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from domain.services.user_service import UserService
    from main import create_app

    app = create_app()

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_user_service] = lambda: UserService(
        uow_factory, auth_provider=auth_provider, password_hasher=password_hasher
    )
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(uow_factory)
    app.dependency_overrides[get_post_service] = lambda: PostService(uow_factory)
    app.dependency_overrides[get_github_client] = lambda: github_client

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


RegisterUser = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
def register_user(client: AsyncClient) -> RegisterUser:
    """Register an account through the API and return its auth headers."""

    async def _register(
        name: str = "Ann",
        email: str = "ann@example.com",
        password: str = "secret1",
    ) -> dict[str, str]:
        response = await client.post(
            "/api/user",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register


@pytest.fixture
async def auth_headers(register_user: RegisterUser) -> dict[str, str]:
    """Headers of a freshly registered user, Ann."""
    return await register_user()
