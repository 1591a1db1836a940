"""Profile service layer with business logic."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError, UserNotFoundError
from domain.entities.profile import (
    PROFILE_FIELDS,
    SOCIAL_PLATFORMS,
    Education,
    Experience,
    Profile,
    ProfileWithOwner,
    parse_skills,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

NO_PROFILE_MESSAGE = "There is no profile for this user"


class ProfileService:
    """Service layer for the Profile aggregate."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[ProfileWithOwner]:
        """Get every profile together with its owner's name and avatar."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            owners = await uow.users.get_many([p.user_id for p in profiles])
            return [ProfileWithOwner(profile=p, owner=owners.get(p.user_id)) for p in profiles]

    async def get_for_user(self, user_id: UUID) -> ProfileWithOwner:
        """Get the profile owned by a user."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(NO_PROFILE_MESSAGE)
            return await self._with_owner(uow, profile)

    async def get_by_id(self, profile_id: UUID) -> ProfileWithOwner:
        """Get a profile by its own ID."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError()
            return await self._with_owner(uow, profile)

    async def upsert(self, user_id: UUID, fields: dict[str, Any]) -> tuple[ProfileWithOwner, bool]:
        """Create the caller's profile or overwrite the submitted fields of it.

        ``fields`` holds only the keys the caller sent. Skills text is split
        into a list; the social mapping is rebuilt from the known platforms and
        always replaced as a whole. Experience and education are never touched.

        Returns the profile and whether it was created.
        """
        values = {key: fields[key] for key in PROFILE_FIELDS if key in fields}
        if "skills" in values:
            values["skills"] = parse_skills(values["skills"] or [])
        social = {
            platform: fields[platform]
            for platform in SOCIAL_PLATFORMS
            if fields.get(platform) is not None
        }

        profile = Profile(user_id=user_id, social=social, **values)

        async with self._uow_factory() as uow:
            if not await uow.users.get(user_id):
                raise UserNotFoundError(str(user_id))

            stored, created = await uow.profiles.upsert(profile, [*values, "social"])
            await uow.commit()

            logger.info(
                "profile_upserted",
                user_id=str(user_id),
                profile_id=str(stored.id),
                created=created,
            )
            return await self._with_owner(uow, stored), created

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the caller's profile and user record in one transaction.

        Posts, likes and comments written by the user are kept.
        """
        async with self._uow_factory() as uow:
            await uow.profiles.delete_by_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()

        logger.info("profile_deleted", user_id=str(user_id))

    async def add_experience(self, user_id: UUID, entry: Experience) -> ProfileWithOwner:
        """Prepend a work experience to the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return await self._with_owner(uow, updated)

    async def remove_experience(self, user_id: UUID, experience_id: UUID) -> ProfileWithOwner:
        """Remove a work experience; an unknown id leaves the profile as is."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.remove_experience(experience_id)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return await self._with_owner(uow, updated)

    async def add_education(self, user_id: UUID, entry: Education) -> ProfileWithOwner:
        """Prepend an education entry to the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return await self._with_owner(uow, updated)

    async def remove_education(self, user_id: UUID, education_id: UUID) -> ProfileWithOwner:
        """Remove an education entry; an unknown id leaves the profile as is."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.remove_education(education_id)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return await self._with_owner(uow, updated)

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError(NO_PROFILE_MESSAGE)
        return profile

    async def _with_owner(self, uow: IUnitOfWork, profile: Profile) -> ProfileWithOwner:
        owner = await uow.users.get(profile.user_id)
        return ProfileWithOwner(profile=profile, owner=owner)
