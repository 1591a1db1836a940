"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from api.schemas.common import DocumentModel
from domain.entities.post import Comment, Like, Post


class TextBody(BaseModel):
    """Schema for creating a post or a comment."""

    text: str

    @field_validator("text")
    @classmethod
    def text_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text is required")
        return value


class LikeResponse(BaseModel):
    """A like: the liking user's id."""

    user: UUID

    @classmethod
    def from_entity(cls, like: Like) -> "LikeResponse":
        return cls(user=like.user_id)


class CommentResponse(DocumentModel):
    """Schema for Comment response."""

    id: UUID = Field(alias="_id")
    user: UUID
    text: str
    name: str | None
    avatar: str | None
    created: datetime = Field(alias="date")

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            user=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            created=comment.created_at,
        )


class PostResponse(DocumentModel):
    """Schema for Post response, likes and comments included."""

    id: UUID = Field(alias="_id")
    user: UUID
    text: str
    name: str | None
    avatar: str | None
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    created: datetime = Field(alias="date")

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            user=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            likes=[LikeResponse.from_entity(like) for like in post.likes],
            comments=[CommentResponse.from_entity(c) for c in post.comments],
            created=post.created_at,
        )
