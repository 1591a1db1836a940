"""SQLAlchemy implementation of Profile repository."""

from collections.abc import Iterable
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Education, Experience, Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        stmt = (
            select(ProfileModel)
            .where(ProfileModel.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def upsert(self, profile: Profile, fields: Iterable[str]) -> tuple[Profile, bool]:
        """Insert the profile, or overwrite ``fields`` of the user's existing one.

        A single INSERT ... ON CONFLICT (user_id) DO UPDATE statement, so
        concurrent calls for one user can never create two rows.
        """
        insert = sqlite_insert if self._session.bind.dialect.name == "sqlite" else pg_insert
        table = ProfileModel.__table__
        stmt = insert(table).values(**self._to_row(profile))
        update_columns = {name: stmt.excluded[name] for name in fields}
        update_columns["updated_at"] = stmt.excluded.updated_at
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id],
            set_=update_columns,
        ).returning(table.c.id)

        result = await self._session.execute(stmt)
        profile_id = result.scalar_one()

        stored = await self.get(profile_id)
        if not stored:
            raise ValueError(f"Profile {profile_id} not found after upsert")
        return stored, profile_id == profile.id

    async def update(self, profile: Profile) -> Profile:
        """Write back the whole profile aggregate."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        row = self._to_row(profile)
        for column in ("status", "company", "website", "location", "bio", "githubusername",
                       "skills", "social", "experience", "education", "updated_at"):
            setattr(model, column, row[column])

        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            githubusername=model.githubusername,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[_experience_from_json(item) for item in model.experience or []],
            education=[_education_from_json(item) for item in model.education or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_row(self, entity: Profile) -> dict[str, Any]:
        """Convert domain entity to column values."""
        return {
            "id": entity.id,
            "user_id": entity.user_id,
            "status": entity.status,
            "company": entity.company,
            "website": entity.website,
            "location": entity.location,
            "bio": entity.bio,
            "githubusername": entity.githubusername,
            "skills": list(entity.skills),
            "social": dict(entity.social),
            "experience": [_experience_to_json(e) for e in entity.experience],
            "education": [_education_to_json(e) for e in entity.education],
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _experience_to_json(entry: Experience) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "title": entry.title,
        "company": entry.company,
        "location": entry.location,
        "from": entry.from_date.isoformat(),
        "to": entry.to_date.isoformat() if entry.to_date else None,
        "current": entry.current,
        "description": entry.description,
    }


def _experience_from_json(data: dict[str, Any]) -> Experience:
    return Experience(
        id=UUID(data["id"]),
        title=data["title"],
        company=data["company"],
        location=data.get("location"),
        from_date=date.fromisoformat(data["from"]),
        to_date=_date_or_none(data.get("to")),
        current=bool(data.get("current", False)),
        description=data.get("description"),
    )


def _education_to_json(entry: Education) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "school": entry.school,
        "degree": entry.degree,
        "fieldofstudy": entry.fieldofstudy,
        "from": entry.from_date.isoformat(),
        "to": entry.to_date.isoformat() if entry.to_date else None,
        "current": entry.current,
        "description": entry.description,
    }


def _education_from_json(data: dict[str, Any]) -> Education:
    return Education(
        id=UUID(data["id"]),
        school=data["school"],
        degree=data["degree"],
        fieldofstudy=data["fieldofstudy"],
        from_date=date.fromisoformat(data["from"]),
        to_date=_date_or_none(data.get("to")),
        current=bool(data.get("current", False)),
        description=data.get("description"),
    )

