from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from authdesk.application.use_cases.users.login_user import LoginUserUseCase
from authdesk.application.use_cases.users.register_user import RegisterUserUseCase
from authdesk.domain.users.entities import SessionToken, User
from authdesk.domain.users.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from authdesk.interfaces.http.controllers.auth_controller import AuthController
from authdesk.shared.config import SecurityConfig
from authdesk.shared.middleware.error_handler import configure_error_handling


def _user(name: str = "Ann", email: str = "ann@x.com") -> User:
    return User(
        id=1,
        name=name,
        email=email,
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


def _token(user: User) -> SessionToken:
    now = datetime.now(UTC)
    return SessionToken(
        token="token123",
        user_id=user.id,
        email=user.email,
        issued_at=now,
        expires_at=now + timedelta(hours=24),
    )


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_signup_endpoint_returns_token_and_public_user(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, name: str, email: str, password: str) -> tuple[User, SessionToken]:
            register_called["args"] = (name, email, password)
            user = _user(name, email)
            return user, _token(user)

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/signup",
            json={"name": "Ann", "email": "ann@x.com", "password": "secret1"},
        )

    assert response.status_code == 201
    assert register_called["args"] == ("Ann", "ann@x.com", "secret1")
    assert response.get_json() == {
        "message": "User created successfully",
        "token": "token123",
        "user": {"id": 1, "name": "Ann", "email": "ann@x.com"},
    }


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ({}, "All fields are required"),
        ({"name": "Ann", "email": "ann@x.com"}, "All fields are required"),
        ({"name": "  ", "email": "ann@x.com", "password": "secret1"}, "All fields are required"),
        ({"name": "Ann", "email": "ann@x.com", "password": None}, "All fields are required"),
        (
            {"name": "Ann", "email": "ann@x.com", "password": "12345"},
            "Password must be at least 6 characters",
        ),
        ({"name": "Ann", "email": "not-an-email", "password": "secret1"}, "Invalid email address"),
        (
            {"name": "Ann", "email": "Evil Name <ann@x.com>", "password": "secret1"},
            "Invalid email address",
        ),
        ({"name": "Ann", "email": "<ann@x.com>", "password": "secret1"}, "Invalid email address"),
    ],
)
def test_signup_invalid_payload_returns_400(flask_app: Flask, body: dict, message: str) -> None:
    register = MagicMock()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/signup", json=body)

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == message
    assert payload["code"] == "validation_error"
    register.execute.assert_not_called()


def test_signup_min_password_length_is_configurable(flask_app: Flask) -> None:
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=MagicMock(), min_password_length=10
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/signup",
            json={"name": "Ann", "email": "ann@x.com", "password": "secret1"},
        )

    assert response.status_code == 400
    assert response.get_json()["error"] == "Password must be at least 10 characters"


def test_signup_conflict_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = EmailAlreadyRegisteredError()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/signup",
            json={"name": "Ann", "email": "ann@x.com", "password": "secret1"},
        )

    assert response.status_code == 400
    assert response.get_json() == {
        "error": "Email already registered",
        "code": "email_already_registered",
    }


def test_login_missing_fields_returns_400(flask_app: Flask) -> None:
    controller = AuthController(register_use_case=MagicMock(), login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"email": "ann@x.com"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Email and password are required"


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=cast(LoginUserUseCase, login)
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"email": "ann@x.com", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid email or password"


def test_login_success(flask_app: Flask) -> None:
    user = _user()
    login = MagicMock()
    login.execute.return_value = (user, _token(user))
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"email": "ann@x.com", "password": "secret1"})

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["message"] == "Login successful"
    assert payload["token"] == "token123"
    assert "password_hash" not in payload["user"]
    login.execute.assert_called_once_with("ann@x.com", "secret1")


def test_unexpected_error_collapses_to_500(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = RuntimeError("connection refused to db-host:1521")
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/signup",
            json={"name": "Ann", "email": "ann@x.com", "password": "secret1"},
        )

    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error", "code": "internal_error"}


def test_login_is_rate_limited(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    security = SecurityConfig(ENABLE_RATE_LIMIT=True, LOGIN_RATE_LIMIT=2)
    controller = AuthController(
        register_use_case=MagicMock(), login_use_case=login, security=security
    )
    flask_app.register_blueprint(controller.as_blueprint())

    body = {"email": "ann@x.com", "password": "nope"}
    with flask_app.test_client() as client:
        statuses = [client.post("/api/login", json=body).status_code for _ in range(3)]
        limited = client.post("/api/login", json=body)

    assert statuses == [401, 401, 429]
    assert limited.get_json()["code"] == "rate_limited"
