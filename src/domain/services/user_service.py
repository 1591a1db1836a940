"""User service: registration, login and caller identity."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.gravatar import gravatar_url
from infrastructure.auth.password_hasher import PasswordHasher
from infrastructure.auth.provider import IAuthProvider, TokenUser

logger = structlog.get_logger()


class UserService:
    """Service layer for identity business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
        password_hasher: PasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth = auth_provider
        self._hasher = password_hasher

    async def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a bearer token for it.

        Raises:
            EmailAlreadyRegisteredError: If the e-mail address is taken
        """
        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise EmailAlreadyRegisteredError()

            user = User(
                name=name,
                email=email,
                password_hash=self._hasher.hash(password),
                avatar=gravatar_url(email),
            )
            created = await uow.users.create(user)
            await uow.commit()

        logger.info("user_registered", user_id=str(created.id))
        return self._auth.create_token(TokenUser(id=created.id))

    async def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return a bearer token.

        Raises:
            InvalidCredentialsError: If the e-mail is unknown or the password wrong
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user or not self._hasher.verify(password, user.password_hash):
            logger.info("login_rejected")
            raise InvalidCredentialsError()

        logger.info("user_logged_in", user_id=str(user.id))
        return self._auth.create_token(TokenUser(id=user.id))

    async def get_user(self, user_id: UUID) -> User:
        """Get the user behind a token."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user
