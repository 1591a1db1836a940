"""Registration API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.services import get_user_service
from api.schemas.user import RegisterRequest, TokenResponse
from domain.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register a user",
    responses={
        200: {"description": "Account created; bearer token returned"},
        400: {"description": "Validation error or e-mail already in use"},
    },
)
async def register(
    body: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """
    Create an account and log it in.

    The avatar is the gravatar image of the e-mail address.
    """
    token = await service.register(name=body.name, email=body.email, password=body.password)
    return TokenResponse(token=token)
