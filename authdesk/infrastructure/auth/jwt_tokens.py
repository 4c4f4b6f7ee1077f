# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens signed with PyJWT.

Tokens carry the user id (``sub``), the email, ``iat`` and ``exp``. Nothing is
persisted server-side, so a token stays valid until it expires.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from authdesk.domain.users.entities import SessionClaims, SessionToken, User
from authdesk.domain.users.exceptions import InvalidTokenError, TokenExpiredError
from authdesk.domain.users.repositories import TokenService
from authdesk.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, user: User) -> SessionToken:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"tokens.issue: user_id={user.id} exp={expires_at.isoformat()}")
        return SessionToken(
            token=token,
            user_id=user.id,
            email=user.email,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def verify(self, token: str) -> SessionClaims:
        try:
            # expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "email", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.info(f"tokens.verify: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        try:
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
            user_id = int(payload["sub"])
            email = str(payload["email"])
        except (TypeError, ValueError) as exc:
            logger.info("tokens.verify: rejected malformed claims")
            raise InvalidTokenError() from exc

        if self._clock() >= expires_at:
            logger.info(f"tokens.verify: expired token for user_id={user_id}")
            raise TokenExpiredError()

        return SessionClaims(user_id=user_id, email=email)


__all__ = ["JwtTokenService"]
