"""Login and caller identity API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_user_service
from api.schemas.user import LoginRequest, TokenResponse, UserResponse
from domain.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
    responses={
        200: {"description": "The caller's user record"},
        401: {"description": "Missing or invalid token"},
        404: {"description": "User no longer exists"},
    },
)
async def get_authenticated_user(
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return the user behind the bearer token, without the password hash."""
    return UserResponse.from_entity(await service.get_user(user.id))


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={
        200: {"description": "Bearer token"},
        400: {"description": "Validation error or invalid credentials"},
    },
)
async def login(
    body: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange e-mail and password for a bearer token."""
    token = await service.authenticate(email=body.email, password=body.password)
    return TokenResponse(token=token)
