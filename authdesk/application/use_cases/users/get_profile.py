# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authdesk.domain.users.entities import User
from authdesk.domain.users.exceptions import UserNotFoundError
from authdesk.domain.users.repositories import UserRepository
from authdesk.shared.logging import logger


class GetProfileUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            logger.warning(f"profile: user_id={user_id} no longer exists")
            raise UserNotFoundError()
        return user


__all__ = ["GetProfileUseCase"]
