# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import cast

from flask import g, request

from authdesk.application.services.session_verifier import SessionVerifier
from authdesk.domain.users.entities import SessionClaims
from authdesk.shared.logging import logger


def current_claims() -> SessionClaims:
    """Return the claims stored by ``auth_required`` for this request."""
    return cast(SessionClaims, g.claims)


def auth_required(verifier: SessionVerifier) -> Callable:
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*a, **kw):
            try:
                claims = verifier.verify(request.headers.get("Authorization"))
            except Exception:
                logger.warning(
                    f"Auth failed on {request.method} {request.path} "
                    f"from {request.remote_addr}"
                )
                raise

            g.claims = claims
            g.user_id = claims.user_id
            logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
            return f(*a, **kw)

        return inner

    return decorator
