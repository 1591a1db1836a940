"""Pydantic schemas for registration, login and the caller identity."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from api.schemas.common import DocumentModel
from domain.entities.user import User


class RegisterRequest(BaseModel):
    """Schema for creating an account."""

    name: str = Field(..., max_length=100)
    email: EmailStr
    password: str

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("password")
    @classmethod
    def password_rules(cls, value: str) -> str:
        if not 6 <= len(value) <= 20:
            raise ValueError("Must be 6-20 characters")
        if not any(ch.isdigit() for ch in value):
            raise ValueError("Should contain a number")
        return value


class LoginRequest(BaseModel):
    """Schema for exchanging credentials for a token."""

    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class TokenResponse(BaseModel):
    """Bearer token issued on register and login."""

    token: str


class UserResponse(DocumentModel):
    """The caller's user record, without the password hash."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Ann",
                "email": "ann@example.com",
                "avatar": "https://www.gravatar.com/avatar/...?s=200&r=pg&d=mm",
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID = Field(alias="_id")
    name: str
    email: str
    avatar: str | None
    created: datetime = Field(alias="date")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            created=user.created_at,
        )
