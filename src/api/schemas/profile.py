"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.schemas.common import DocumentModel
from domain.entities.profile import (
    Education,
    Experience,
    ProfileWithOwner,
    parse_skills,
)


def _required(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    return value


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    Only the keys present in the request body are written.
    """

    status: str = Field(..., max_length=100)
    skills: str | list[str]
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    githubusername: str | None = Field(None, max_length=100)
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    @field_validator("status")
    @classmethod
    def status_required(cls, value: str) -> str:
        return _required(value, "Status")

    @field_validator("skills")
    @classmethod
    def skills_required(cls, value: str | list[str]) -> str | list[str]:
        if not parse_skills(value):
            raise ValueError("Skills is required")
        return value

    def submitted_fields(self) -> dict[str, Any]:
        """Fields the caller actually sent. An explicit null clears the field."""
        return self.model_dump(exclude_unset=True)


class ExperienceCreate(BaseModel):
    """Schema for adding a work experience."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., max_length=255)
    company: str = Field(..., max_length=255)
    location: str | None = Field(None, max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        return _required(value, "Title")

    @field_validator("company")
    @classmethod
    def company_required(cls, value: str) -> str:
        return _required(value, "Company")

    def to_entity(self) -> Experience:
        return Experience(
            title=self.title,
            company=self.company,
            location=self.location,
            from_date=self.from_date,
            to_date=self.to_date,
            current=self.current,
            description=self.description,
        )


class EducationCreate(BaseModel):
    """Schema for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(..., max_length=255)
    degree: str = Field(..., max_length=255)
    fieldofstudy: str = Field(..., max_length=255)
    from_date: date = Field(..., alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @field_validator("school")
    @classmethod
    def school_required(cls, value: str) -> str:
        return _required(value, "School")

    @field_validator("degree")
    @classmethod
    def degree_required(cls, value: str) -> str:
        return _required(value, "Degree")

    @field_validator("fieldofstudy")
    @classmethod
    def fieldofstudy_required(cls, value: str) -> str:
        return _required(value, "Field of study")

    def to_entity(self) -> Education:
        return Education(
            school=self.school,
            degree=self.degree,
            fieldofstudy=self.fieldofstudy,
            from_date=self.from_date,
            to_date=self.to_date,
            current=self.current,
            description=self.description,
        )


class OwnerSummary(DocumentModel):
    """The profile owner's public identity."""

    id: UUID = Field(alias="_id")
    name: str
    avatar: str | None


class ExperienceResponse(DocumentModel):
    """Schema for an experience entry in a profile response."""

    id: UUID = Field(alias="_id")
    title: str
    company: str
    location: str | None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(alias="to")
    current: bool
    description: str | None


class EducationResponse(DocumentModel):
    """Schema for an education entry in a profile response."""

    id: UUID = Field(alias="_id")
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(alias="to")
    current: bool
    description: str | None


class ProfileResponse(DocumentModel):
    """Schema for Profile response."""

    id: UUID = Field(alias="_id")
    user: OwnerSummary | None
    status: str
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    githubusername: str | None
    skills: list[str]
    social: dict[str, str]
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created: datetime = Field(alias="date")

    @classmethod
    def from_entity(cls, item: ProfileWithOwner) -> "ProfileResponse":
        profile, owner = item.profile, item.owner
        return cls(
            id=profile.id,
            user=(
                OwnerSummary(id=owner.id, name=owner.name, avatar=owner.avatar)
                if owner
                else None
            ),
            status=profile.status,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            githubusername=profile.githubusername,
            skills=profile.skills,
            social=profile.social,
            experience=[
                ExperienceResponse(
                    id=e.id,
                    title=e.title,
                    company=e.company,
                    location=e.location,
                    from_date=e.from_date,
                    to_date=e.to_date,
                    current=e.current,
                    description=e.description,
                )
                for e in profile.experience
            ],
            education=[
                EducationResponse(
                    id=e.id,
                    school=e.school,
                    degree=e.degree,
                    fieldofstudy=e.fieldofstudy,
                    from_date=e.from_date,
                    to_date=e.to_date,
                    current=e.current,
                    description=e.description,
                )
                for e in profile.education
            ],
            created=profile.created_at,
        )
