"""Password hashing backed by passlib."""

from passlib.context import CryptContext


class PasswordHasher:
    """Hash and verify user passwords."""

    def __init__(self, schemes: list[str] | None = None) -> None:
        self._context = CryptContext(schemes=schemes or ["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain password against a stored hash."""
        if not password_hash:
            return False
        return bool(self._context.verify(password, password_hash))
