"""Integration tests for the SQLAlchemy repositories against SQLite."""

from uuid import uuid4

import pytest

from core.exceptions import EmailAlreadyRegisteredError
from domain.entities.post import Comment, Post
from domain.entities.profile import Profile
from domain.entities.user import User


async def _create_user(uow_factory, email: str = "ann@example.com") -> User:
    async with uow_factory() as uow:
        user = await uow.users.create(User(name="Ann", email=email, password_hash="x"))
        await uow.commit()
    return user


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_unique_email(self, uow_factory) -> None:
        await _create_user(uow_factory, "ann@example.com")

        with pytest.raises(EmailAlreadyRegisteredError):
            await _create_user(uow_factory, "ANN@example.com")

    @pytest.mark.asyncio
    async def test_get_many(self, uow_factory) -> None:
        ann = await _create_user(uow_factory, "ann@example.com")
        bob = await _create_user(uow_factory, "bob@example.com")

        async with uow_factory() as uow:
            users = await uow.users.get_many([ann.id, bob.id, uuid4()])

        assert set(users) == {ann.id, bob.id}


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_upsert_inserts_then_updates_same_row(self, uow_factory) -> None:
        user = await _create_user(uow_factory)

        async with uow_factory() as uow:
            first, created = await uow.profiles.upsert(
                Profile(user_id=user.id, status="Dev", skills=["go"], bio="Hi"),
                ["status", "skills", "bio", "social"],
            )
            await uow.commit()

        async with uow_factory() as uow:
            second, created_again = await uow.profiles.upsert(
                Profile(user_id=user.id, status="Lead", skills=["rust"]),
                ["status", "skills", "social"],
            )
            await uow.commit()

        assert created is True
        assert created_again is False
        assert second.id == first.id
        assert second.status == "Lead"
        assert second.skills == ["rust"]
        assert second.bio == "Hi"

    @pytest.mark.asyncio
    async def test_update_persists_entries(self, uow_factory) -> None:
        from datetime import date

        from domain.entities.profile import Experience

        user = await _create_user(uow_factory)
        async with uow_factory() as uow:
            profile, _ = await uow.profiles.upsert(
                Profile(user_id=user.id, status="Dev"), ["status", "social"]
            )
            profile.add_experience(
                Experience(title="Dev", company="Acme", from_date=date(2020, 1, 1))
            )
            await uow.profiles.update(profile)
            await uow.commit()

        async with uow_factory() as uow:
            stored = await uow.profiles.get_by_user(user.id)

        assert stored is not None
        assert [e.title for e in stored.experience] == ["Dev"]
        assert stored.experience[0].from_date == date(2020, 1, 1)
        assert stored.experience[0].to_date is None


class TestPostRepository:
    @pytest.mark.asyncio
    async def test_like_is_stored_once(self, uow_factory) -> None:
        user_id = uuid4()
        async with uow_factory() as uow:
            post = await uow.posts.create(Post(user_id=user_id, text="Hi"))
            first = await uow.posts.add_like(post.id, user_id)
            second = await uow.posts.add_like(post.id, user_id)
            await uow.commit()
            likes = await uow.posts.get_likes(post.id)

        assert first is True
        assert second is False
        assert len(likes) == 1

    @pytest.mark.asyncio
    async def test_delete_post_removes_likes_and_comments(self, uow_factory) -> None:
        user_id = uuid4()
        async with uow_factory() as uow:
            post = await uow.posts.create(Post(user_id=user_id, text="Hi"))
            await uow.posts.add_like(post.id, user_id)
            await uow.posts.add_comment(post.id, Comment(user_id=user_id, text="Yo"))
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.posts.delete(post.id) is True
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.posts.get(post.id) is None
            assert await uow.posts.get_likes(post.id) == []
            assert await uow.posts.get_comments(post.id) == []

    @pytest.mark.asyncio
    async def test_get_loads_likes_and_comments(self, uow_factory) -> None:
        user_id = uuid4()
        async with uow_factory() as uow:
            post = await uow.posts.create(Post(user_id=user_id, text="Hi", name="Ann"))
            await uow.posts.add_like(post.id, user_id)
            comment = await uow.posts.add_comment(
                post.id, Comment(user_id=user_id, text="Yo", name="Ann")
            )
            await uow.commit()

        async with uow_factory() as uow:
            loaded = await uow.posts.get(post.id)

        assert loaded is not None
        assert [like.user_id for like in loaded.likes] == [user_id]
        assert loaded.find_comment(comment.id) is not None
