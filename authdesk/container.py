"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from authdesk.application.services.password_hashing import WerkzeugPasswordHasher
from authdesk.application.services.session_verifier import SessionVerifier
from authdesk.application.use_cases.users.get_dashboard import GetDashboardUseCase
from authdesk.application.use_cases.users.get_profile import GetProfileUseCase
from authdesk.application.use_cases.users.login_user import LoginUserUseCase
from authdesk.application.use_cases.users.register_user import RegisterUserUseCase
from authdesk.infrastructure.auth.jwt_tokens import JwtTokenService
from authdesk.infrastructure.db import Database
from authdesk.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from authdesk.interfaces.http.controllers.auth_controller import AuthController
from authdesk.interfaces.http.controllers.misc_controller import MiscController
from authdesk.interfaces.http.controllers.profile_controller import ProfileController
from authdesk.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.auth.jwt_secret,
            algorithm=self.config.auth.jwt_algorithm,
            ttl=timedelta(hours=self.config.auth.token_ttl_hours),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def session_verifier(self) -> SessionVerifier:
        return SessionVerifier(tokens=self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(users=self.user_repository)

    @cached_property
    def get_dashboard_use_case(self) -> GetDashboardUseCase:
        return GetDashboardUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            security=self.config.security,
            min_password_length=self.config.auth.min_password_length,
        )

    @cached_property
    def profile_controller(self) -> ProfileController:
        return ProfileController(
            verifier=self.session_verifier,
            get_profile=self.get_profile_use_case,
            get_dashboard=self.get_dashboard_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            database=self.database,
            service_name=self.config.observability.service_name,
            metrics_enabled=self.config.observability.metrics_enabled,
        )

    def close(self) -> None:
        if "database" in self.__dict__:
            self.database.dispose()
