import pytest

from authdesk.shared.config import AppConfig, AuthConfig, SecurityConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JWT_SECRET", "TOKEN_TTL_HOURS", "PORT", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig()

    assert config.port == 5000
    assert config.auth.token_ttl_hours == 24
    assert config.auth.jwt_algorithm == "HS256"
    assert config.auth.min_password_length == 6
    assert config.database.url.startswith("sqlite")


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://app:pw@db/app")

    config = AppConfig()

    assert config.port == 8080
    assert config.auth.jwt_secret == "from-env"
    assert config.database.is_sqlite() is False


def test_allowed_origins_comma_separated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    assert SecurityConfig().allowed_origins == ["http://a.test", "http://b.test"]


def test_production_rejects_default_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(APP_ENV="production", auth=AuthConfig(JWT_SECRET="dev"))


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(
        APP_ENV="production",
        auth=AuthConfig(JWT_SECRET="a-strong-random-secret-value-0123456789"),
    )

    assert config.is_production() is True
