# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authdesk.domain.users.entities import SessionClaims
from authdesk.domain.users.exceptions import MissingTokenError
from authdesk.domain.users.repositories import TokenService

_BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    value = authorization.strip()
    if value[: len(_BEARER_PREFIX)].lower() != _BEARER_PREFIX:
        return None
    return value[len(_BEARER_PREFIX):].strip() or None


class SessionVerifier:
    """Turns an ``Authorization`` header into verified session claims.

    Raises ``MissingTokenError`` when no bearer token is present and lets the
    token service raise ``InvalidTokenError`` for bad signatures or expiry.
    """

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def verify(self, authorization: str | None) -> SessionClaims:
        token = extract_bearer_token(authorization)
        if token is None:
            raise MissingTokenError()
        return self._tokens.verify(token)
