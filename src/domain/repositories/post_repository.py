"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Comment, Like, Post


class IPostRepository(Protocol):
    """Repository interface for the Post aggregate."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post with its likes and comments."""
        ...

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post with its likes and comments."""
        ...

    async def add_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Record a like unless the user already liked the post.

        The existence check and the insert happen in one statement.
        Returns False when a like by the user was already present.
        """
        ...

    async def remove_like(self, post_id: UUID, user_id: UUID) -> None:
        """Remove the user's like, if any."""
        ...

    async def get_likes(self, post_id: UUID) -> list[Like]:
        """Get the likes of a post in insertion order."""
        ...

    async def add_comment(self, post_id: UUID, comment: Comment) -> Comment:
        """Append a comment to a post."""
        ...

    async def delete_comment(self, comment_id: UUID) -> bool:
        """Delete a comment and return success status."""
        ...

    async def get_comments(self, post_id: UUID) -> list[Comment]:
        """Get the comments of a post in insertion order."""
        ...
