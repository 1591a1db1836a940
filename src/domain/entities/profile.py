"""Profile aggregate: a developer profile and the records it owns."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from domain.entities.user import User

# GitHub is a top-level profile field, never a social link.
SOCIAL_PLATFORMS: tuple[str, ...] = ("youtube", "twitter", "facebook", "linkedin", "instagram")

# Scalar profile fields written by an upsert when present in the request.
PROFILE_FIELDS: tuple[str, ...] = (
    "status",
    "company",
    "website",
    "location",
    "bio",
    "githubusername",
    "skills",
)


def parse_skills(raw: str | list[str]) -> list[str]:
    """Split a comma separated skills string into trimmed, ordered entries."""
    parts = raw.split(",") if isinstance(raw, str) else raw
    return [part.strip() for part in parts if part and part.strip()]


@dataclass
class Experience:
    """Work experience entry owned by a Profile."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """Education entry owned by a Profile."""

    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Profile:
    """Domain entity for a developer profile.

    Experience and education entries have no lifecycle of their own; they are
    only changed through the methods below and persisted with the profile.
    """

    user_id: UUID
    status: str
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def add_experience(self, entry: Experience) -> None:
        """Prepend an experience entry (newest first)."""
        self.experience = [entry, *self.experience]
        self.updated_at = datetime.utcnow()

    def remove_experience(self, experience_id: UUID) -> None:
        """Drop the experience entry with the given id, if any."""
        self.experience = [e for e in self.experience if e.id != experience_id]
        self.updated_at = datetime.utcnow()

    def add_education(self, entry: Education) -> None:
        """Prepend an education entry (newest first)."""
        self.education = [entry, *self.education]
        self.updated_at = datetime.utcnow()

    def remove_education(self, education_id: UUID) -> None:
        """Drop the education entry with the given id, if any."""
        self.education = [e for e in self.education if e.id != education_id]
        self.updated_at = datetime.utcnow()


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile bundled with its owning user."""

    profile: Profile
    owner: User | None
