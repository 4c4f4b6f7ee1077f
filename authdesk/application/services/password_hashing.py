"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from authdesk.domain.users.repositories import PasswordHasher
from authdesk.shared.errors import InfrastructureError
from authdesk.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted, adaptive hashes via werkzeug (scrypt unless configured otherwise)."""

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (ValueError, TypeError) as exc:
            logger.error(f"password hashing failed: method={self._method} ({type(exc).__name__})")
            raise InfrastructureError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            logger.warning("password verification against malformed hash")
            return False
