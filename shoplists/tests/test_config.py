import pytest

from shoplists.shared.config import AppConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "SESSION_TTL_SECONDS", "ADMIN_PASSWORD", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig(_env_file=None)

    assert config.port == 8888
    assert config.session.ttl_seconds == 7 * 24 * 60 * 60
    assert config.credentials.admin_password == "password"
    assert config.security.allowed_origins == ["*"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("SESSION_TTL_SECONDS", "60")
    monkeypatch.setenv("ADMIN_PASSWORD", "hunter2")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")

    config = AppConfig(_env_file=None)

    assert config.port == 9000
    assert config.session.ttl_seconds == 60
    assert config.credentials.admin_password == "hunter2"
    assert config.security.allowed_origins == ["http://a.test", "http://b.test"]
    assert config.debug_logging is True


def test_production_warns_about_default_passwords(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    monkeypatch.setenv("APP_ENV", "production")

    AppConfig(_env_file=None)

    assert "ADMIN_PASSWORD" in capsys.readouterr().err
