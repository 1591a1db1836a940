"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import PostCommentModel, PostLikeModel, PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post with its likes and comments."""
        stmt = (
            select(PostModel)
            .where(PostModel.id == id)
            .options(selectinload(PostModel.likes), selectinload(PostModel.comments))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = (
            select(PostModel)
            .options(selectinload(PostModel.likes), selectinload(PostModel.comments))
            .order_by(PostModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            user_id=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            created_at=post.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        created = await self.get(model.id)
        if not created:
            raise ValueError(f"Post {model.id} not found after insert")
        return created

    async def delete(self, id: UUID) -> bool:
        """Delete a post; likes and comments go with it (cascade)."""
        stmt = (
            select(PostModel)
            .where(PostModel.id == id)
            .options(selectinload(PostModel.likes), selectinload(PostModel.comments))
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def add_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Insert a like unless the (post, user) pair already exists.

        INSERT ... ON CONFLICT DO NOTHING against the unique constraint: two
        concurrent likes by the same user cannot both be stored.
        """
        insert = sqlite_insert if self._session.bind.dialect.name == "sqlite" else pg_insert
        table = PostLikeModel.__table__
        stmt = (
            insert(table)
            .values(post_id=post_id, user_id=user_id, created_at=datetime.utcnow())
            .on_conflict_do_nothing(index_elements=[table.c.post_id, table.c.user_id])
            .returning(table.c.id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def remove_like(self, post_id: UUID, user_id: UUID) -> None:
        """Remove the user's like, if any."""
        stmt = delete(PostLikeModel).where(
            PostLikeModel.post_id == post_id,
            PostLikeModel.user_id == user_id,
        )
        await self._session.execute(stmt)
        await self._session.flush()

    async def get_likes(self, post_id: UUID) -> list[Like]:
        """Get the likes of a post in insertion order."""
        stmt = (
            select(PostLikeModel.user_id)
            .where(PostLikeModel.post_id == post_id)
            .order_by(PostLikeModel.id)
        )
        result = await self._session.execute(stmt)
        return [Like(user_id=user_id) for user_id in result.scalars()]

    async def add_comment(self, post_id: UUID, comment: Comment) -> Comment:
        """Append a comment to a post."""
        model = PostCommentModel(
            id=comment.id,
            post_id=post_id,
            user_id=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            created_at=comment.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._comment_to_entity(model)

    async def delete_comment(self, comment_id: UUID) -> bool:
        """Delete a comment."""
        stmt = select(PostCommentModel).where(PostCommentModel.id == comment_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def get_comments(self, post_id: UUID) -> list[Comment]:
        """Get the comments of a post in insertion order."""
        stmt = (
            select(PostCommentModel)
            .where(PostCommentModel.post_id == post_id)
            .order_by(PostCommentModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._comment_to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[Like(user_id=like.user_id) for like in model.likes],
            comments=[self._comment_to_entity(c) for c in model.comments],
            created_at=model.created_at,
        )

    def _comment_to_entity(self, model: PostCommentModel) -> Comment:
        """Convert ORM comment model to domain entity."""
        return Comment(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            created_at=model.created_at,
        )
