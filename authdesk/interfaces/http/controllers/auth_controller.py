# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authdesk.application.use_cases.users.login_user import LoginUserUseCase
from authdesk.application.use_cases.users.register_user import \
    RegisterUserUseCase
from authdesk.interfaces.http.dto.auth import (MIN_PASSWORD_LENGTH,
                                               AuthSuccessDTO,
                                               LoginRequestDTO,
                                               SignupRequestDTO, UserDTO)
from authdesk.shared.config import SecurityConfig
from authdesk.shared.errors.validation import raise_validation_error
from authdesk.shared.logging import logger
from authdesk.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        security: SecurityConfig | None = None,
        min_password_length: int = MIN_PASSWORD_LENGTH,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._security = security
        self._min_password_length = min_password_length

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(
                request.get_json(silent=True) or {},
                context={"min_password_length": self._min_password_length},
            )
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.name, dto.email, dto.password)

        payload = AuthSuccessDTO(
            message="User created successfully",
            token=token.token,
            user=UserDTO.from_domain(user.public()),
        )
        logger.info(f"auth.signup: responded user_id={user.id}")
        return jsonify(payload.model_dump()), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.email, dto.password)

        payload = AuthSuccessDTO(
            message="Login successful",
            token=token.token,
            user=UserDTO.from_domain(user.public()),
        )
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        signup = self.signup
        login = self.login
        if self._security is not None:
            window = self._security.rate_limit_window
            enabled = self._security.enable_rate_limit
            signup = rate_limit(self._security.signup_rate_limit, window, enabled=enabled)(signup)
            login = rate_limit(self._security.login_rate_limit, window, enabled=enabled)(login)

        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/signup", view_func=signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=login, methods=["POST"])
        return bp
