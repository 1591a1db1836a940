"""Profile API routes."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_github_client, get_profile_service
from api.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    ProfileResponse,
    ProfileUpsert,
)
from domain.services.profile_service import ProfileService
from infrastructure.github.client import GitHubClient

router = APIRouter(prefix="/profile", tags=["profiles"])


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List all profiles",
)
async def list_profiles(
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    """Get every profile with its owner's name and avatar."""
    profiles = await service.get_all()
    return [ProfileResponse.from_entity(p) for p in profiles]


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update the caller's profile",
    responses={
        200: {"description": "Existing profile updated"},
        201: {"description": "Profile created"},
        400: {"description": "Validation error"},
        401: {"description": "Missing or invalid token"},
    },
)
async def upsert_profile(
    body: ProfileUpsert,
    user: CurrentUser,
    response: Response,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Create the caller's profile, or overwrite the fields sent in the body.

    `skills` may be a comma separated string. Social links are rebuilt from
    `youtube`, `twitter`, `facebook`, `linkedin` and `instagram` on every call.
    Experience and education are left untouched.
    """
    profile, created = await service.upsert(user.id, body.submitted_fields())
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return ProfileResponse.from_entity(profile)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete the caller's profile and account",
    responses={
        204: {"description": "Profile and user deleted; posts are kept"},
        401: {"description": "Missing or invalid token"},
    },
)
async def delete_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> Response:
    """Delete the caller's profile and user record together."""
    await service.delete_account(user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get the caller's profile",
    responses={404: {"description": "The caller has no profile"}},
)
async def get_my_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_entity(await service.get_for_user(user.id))


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get a profile by user ID",
    responses={404: {"description": "The user has no profile"}},
)
async def get_profile_by_user(
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_entity(await service.get_for_user(user_id))


@router.post(
    "/experience",
    response_model=ProfileResponse,
    summary="Add a work experience",
    responses={404: {"description": "The caller has no profile"}},
)
async def add_experience(
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Prepend a work experience to the caller's profile."""
    profile = await service.add_experience(user.id, body.to_entity())
    return ProfileResponse.from_entity(profile)


@router.delete(
    "/experience/{experience_id}",
    response_model=ProfileResponse,
    summary="Remove a work experience",
    responses={404: {"description": "The caller has no profile"}},
)
async def remove_experience(
    experience_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove a work experience. An unknown ID leaves the profile unchanged."""
    profile = await service.remove_experience(user.id, experience_id)
    return ProfileResponse.from_entity(profile)


@router.post(
    "/education",
    response_model=ProfileResponse,
    summary="Add an education entry",
    responses={404: {"description": "The caller has no profile"}},
)
async def add_education(
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Prepend an education entry to the caller's profile."""
    profile = await service.add_education(user.id, body.to_entity())
    return ProfileResponse.from_entity(profile)


@router.delete(
    "/education/{education_id}",
    response_model=ProfileResponse,
    summary="Remove an education entry",
    responses={404: {"description": "The caller has no profile"}},
)
async def remove_education(
    education_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove an education entry. An unknown ID leaves the profile unchanged."""
    profile = await service.remove_education(user.id, education_id)
    return ProfileResponse.from_entity(profile)


@router.get(
    "/github/{username}",
    summary="List a GitHub user's newest repositories",
    responses={
        200: {"description": "Up to five repositories, newest first, as GitHub returns them"},
        404: {"description": "GitHub did not answer with 200"},
    },
)
async def get_github_repos(
    username: str,
    github: GitHubClient = Depends(get_github_client),
) -> list[dict[str, Any]]:
    return await github.get_recent_repos(username)


@router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Get a profile by ID",
    responses={404: {"description": "Profile not found"}},
)
async def get_profile(
    profile_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_entity(await service.get_by_id(profile_id))
