# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from authdesk.shared.errors.base import AuthError, ConflictError, NotFoundError


class EmailAlreadyRegisteredError(ConflictError):
    code = "email_already_registered"
    message = "Email already registered"


class InvalidCredentialsError(AuthError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class MissingTokenError(AuthError):
    code = "token_missing"
    message = "Access token required"


class InvalidTokenError(AuthError):
    code = "token_invalid"
    status = HTTPStatus.FORBIDDEN
    message = "Invalid or expired token"


class TokenExpiredError(InvalidTokenError):
    code = "token_expired"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    message = "User not found"
