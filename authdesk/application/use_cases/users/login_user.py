# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authdesk.domain.users.entities import SessionToken, User, normalize_email
from authdesk.domain.users.exceptions import InvalidCredentialsError
from authdesk.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from authdesk.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> tuple[User, SessionToken]:
        user = self._users.find_by_email(normalize_email(email))
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            # same error for unknown email and wrong password
            logger.info("auth.login: rejected, invalid credentials")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user)
        logger.info(f"auth.login: ok user_id={user.id}")
        return user, token
