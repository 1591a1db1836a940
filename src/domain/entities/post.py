"""Post aggregate: a feed post with its likes and comments."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class Like:
    """A user's like on a post."""

    user_id: UUID


@dataclass
class Comment:
    """Comment owned by a Post.

    ``name`` and ``avatar`` are copied from the commenter's user record when
    the comment is written.
    """

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a post.

    ``name`` and ``avatar`` snapshot the author at creation time and are not
    kept in sync with later changes to the user.
    """

    user_id: UUID
    text: str
    id: UUID = field(default_factory=uuid4)
    name: str | None = None
    avatar: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_authored_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def find_comment(self, comment_id: UUID) -> Comment | None:
        """Return the comment with the given id, or None."""
        return next((c for c in self.comments if c.id == comment_id), None)
