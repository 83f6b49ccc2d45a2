from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from blog.app import create_app
from blog.container import Container
from blog.shared.config import AppConfig, DatabaseConfig

TEST_SESSION_KEY = "test-session-key-0123456789"


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        _env_file=None,
        session_key=TEST_SESSION_KEY,
        database=DatabaseConfig(_env_file=None, url=f"sqlite:///{tmp_path / 'blog.db'}"),
    )


@pytest.fixture()
def container(config: AppConfig) -> Iterator[Container]:
    container = Container(config)
    yield container
    container.database.dispose()


@pytest.fixture()
def app(config: AppConfig, container: Container) -> Flask:
    app = create_app(config, container=container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def user(container: Container) -> tuple[str, str]:
    container.database.create_tables()
    container.create_user_use_case.execute("alice", "s3cret-pass")
    return "alice", "s3cret-pass"


@pytest.fixture()
def logged_in(client: FlaskClient, user: tuple[str, str]) -> FlaskClient:
    username, password = user
    response = client.post("/login", data={"username": username, "password": password})
    assert response.status_code == 302
    return client
