"""Post service layer: posts, likes and comments."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyLikedError,
    AuthorizationError,
    CommentNotFoundError,
    PostNotFoundError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class PostService:
    """Service layer for the Post aggregate."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post, snapshotting the author's current name and avatar."""
        async with self._uow_factory() as uow:
            author = await uow.users.get(user_id)
            if not author:
                raise UserNotFoundError(str(user_id))

            post = Post(user_id=user_id, text=text, name=author.name, avatar=author.avatar)
            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def get_all(self) -> list[Post]:
        """Get every post, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()

    async def get_by_id(self, post_id: UUID) -> Post:
        """Get a post with its likes and comments."""
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def delete(self, post_id: UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do so.

        Raises:
            PostNotFoundError: If the post doesn't exist
            AuthorizationError: If the caller is not the author
        """
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.is_authored_by(user_id):
                raise AuthorizationError()

            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id), user_id=str(user_id))

    async def add_like(self, post_id: UUID, user_id: UUID) -> list[Like]:
        """Like a post once per user.

        Raises:
            PostNotFoundError: If the post doesn't exist
            AlreadyLikedError: If the caller already liked the post
        """
        async with self._uow_factory() as uow:
            await self._require_post(uow, post_id)

            if not await uow.posts.add_like(post_id, user_id):
                raise AlreadyLikedError(str(post_id))

            await uow.commit()
            likes = await uow.posts.get_likes(post_id)

        logger.info("post_liked", post_id=str(post_id), user_id=str(user_id))
        return likes

    async def remove_like(self, post_id: UUID, user_id: UUID) -> list[Like]:
        """Remove the caller's like; succeeds whether or not one existed."""
        async with self._uow_factory() as uow:
            await self._require_post(uow, post_id)
            await uow.posts.remove_like(post_id, user_id)
            await uow.commit()
            likes = await uow.posts.get_likes(post_id)

        logger.info("post_unliked", post_id=str(post_id), user_id=str(user_id))
        return likes

    async def add_comment(self, post_id: UUID, user_id: UUID, text: str) -> list[Comment]:
        """Append a comment carrying the commenter's current name and avatar."""
        async with self._uow_factory() as uow:
            await self._require_post(uow, post_id)

            author = await uow.users.get(user_id)
            if not author:
                raise UserNotFoundError(str(user_id))

            comment = Comment(user_id=user_id, text=text, name=author.name, avatar=author.avatar)
            await uow.posts.add_comment(post_id, comment)
            await uow.commit()
            comments = await uow.posts.get_comments(post_id)

        logger.info(
            "comment_added",
            post_id=str(post_id),
            comment_id=str(comment.id),
            user_id=str(user_id),
        )
        return comments

    async def delete_comment(
        self, post_id: UUID, comment_id: UUID, user_id: UUID
    ) -> list[Comment]:
        """Delete a comment. Only its author may do so.

        Raises:
            PostNotFoundError: If the post doesn't exist
            CommentNotFoundError: If the post has no such comment
            AuthorizationError: If the caller did not write the comment
        """
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)

            comment = post.find_comment(comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id:
                raise AuthorizationError()

            await uow.posts.delete_comment(comment_id)
            await uow.commit()
            comments = await uow.posts.get_comments(post_id)

        logger.info("comment_deleted", post_id=str(post_id), comment_id=str(comment_id))
        return comments

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> Post:
        post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post
