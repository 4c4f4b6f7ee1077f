# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from authdesk.domain.users.entities import SessionToken, User, normalize_email
from authdesk.domain.users.exceptions import EmailAlreadyRegisteredError
from authdesk.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from authdesk.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(self, name: str, email: str, password: str) -> tuple[User, SessionToken]:
        email = normalize_email(email)
        if self._users.find_by_email(email):
            logger.info("auth.signup: rejected, email already registered")
            raise EmailAlreadyRegisteredError()

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            name=name.strip(),
            email=email,
            password_hash=hashed,
            created_at=self._clock(),
        )
        # the unique constraint decides races that slip past the lookup above
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted)
        logger.info(f"auth.signup: ok user_id={persisted.id}")
        return persisted, token
