from __future__ import annotations

import pytest
from pydantic import ValidationError

from blog.shared.config import AppConfig, DatabaseConfig, SecurityConfig


def test_session_key_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SESSION_KEY", raising=False)

    with pytest.raises(ValidationError):
        AppConfig(_env_file=None)


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SESSION_KEY", "from-env")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("COOKIE_SAMESITE", "strict")

    config = AppConfig(_env_file=None)

    assert config.session_key == "from-env"
    assert config.debug_logging is True
    assert DatabaseConfig(_env_file=None).url == "sqlite:///other.db"
    assert SecurityConfig(_env_file=None).cookie_samesite == "Strict"


def test_invalid_samesite_rejected() -> None:
    with pytest.raises(ValidationError):
        SecurityConfig(_env_file=None, cookie_samesite="sometimes")


def test_weak_key_aborts_in_production() -> None:
    with pytest.raises(SystemExit):
        AppConfig(_env_file=None, session_key="dev", app_env="production")


def test_strong_key_accepted_in_production() -> None:
    config = AppConfig(
        _env_file=None,
        session_key="a-very-long-random-session-key",
        app_env="production",
        security=SecurityConfig(_env_file=None, cookie_secure=True),
    )

    assert config.is_production()
