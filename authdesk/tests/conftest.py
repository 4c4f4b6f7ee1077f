from __future__ import annotations

from pathlib import Path

import pytest
from flask import Flask

from authdesk.app import create_app
from authdesk.container import Container
from authdesk.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig
from fakes import TEST_SECRET


def make_config(db_path: Path, *, rate_limit: bool = False, proxy_hops: int = 0) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{db_path}"),
        auth=AuthConfig(
            JWT_SECRET=TEST_SECRET,
            PASSWORD_HASH_METHOD="pbkdf2:sha256:1000",
        ),
        security=SecurityConfig(ENABLE_RATE_LIMIT=rate_limit, TRUSTED_PROXY_HOPS=proxy_hops),
    )


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path / "authdesk.db")


@pytest.fixture()
def container(config: AppConfig):
    container = Container(config)
    yield container
    container.close()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def app_factory(tmp_path: Path):
    containers: list[Container] = []

    def factory(**overrides) -> Flask:
        container = Container(make_config(tmp_path / "authdesk.db", **overrides))
        containers.append(container)
        return create_app(container)

    yield factory
    for container in containers:
        container.close()
