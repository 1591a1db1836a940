"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.post import Post
from domain.entities.profile import Profile
from domain.entities.user import User


class FakeUnitOfWork:
    """Fake Unit of Work with the three repository mocks for unit testing."""

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.profiles = AsyncMock()
        self.posts = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    """A random user ID distinct from user_id."""
    return uuid4()


@pytest.fixture
def user(user_id: UUID) -> User:
    return User(
        id=user_id,
        name="Ann",
        email="ann@example.com",
        password_hash="hashed",
        avatar="https://www.gravatar.com/avatar/abc?s=200&r=pg&d=mm",
    )


@pytest.fixture
def profile(user_id: UUID) -> Profile:
    return Profile(user_id=user_id, status="Developer", skills=["python"])


@pytest.fixture
def post(user_id: UUID) -> Post:
    return Post(user_id=user_id, text="Hello", name="Ann")
