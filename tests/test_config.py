"""Tests for settings loading."""

from __future__ import annotations

from statsproxy.api.client import ESPN_BASE_URL, NHL_BASE_URL
from statsproxy.config import ENV_OVERRIDES, Settings, load_settings


def _clear_env(monkeypatch):
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)


def test_defaults():
    settings = Settings()
    assert settings.nhl_api_base == NHL_BASE_URL
    assert settings.espn_api_base == ESPN_BASE_URL
    assert settings.port == 8000
    assert settings.cors_origins == ["*"]


def test_validators():
    settings = Settings(
        nhl_api_base=" https://nhl.test/v1/ ",
        log_level="debug",
        cors_origins="http://a.test, http://b.test",
    )
    assert settings.nhl_api_base == "https://nhl.test/v1"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_load_from_yaml(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    path = tmp_path / "settings.yaml"
    path.write_text("port: 9000\nrequest_timeout: 5\n")

    settings = load_settings(path)
    assert settings.port == 9000
    assert settings.request_timeout == 5.0


def test_env_overrides_yaml(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    path = tmp_path / "settings.yaml"
    path.write_text("port: 9000\n")
    monkeypatch.setenv("STATSPROXY_PORT", "9100")
    monkeypatch.setenv("NHL_API_BASE", "https://mirror.test/v1")
    monkeypatch.setenv("ESPN_API_BASE", "https://espn.mirror.test/sports/")

    settings = load_settings(path)
    assert settings.port == 9100
    assert settings.nhl_api_base == "https://mirror.test/v1"
    assert settings.espn_api_base == "https://espn.mirror.test/sports"


def test_bad_yaml_falls_back_to_defaults(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    path = tmp_path / "settings.yaml"
    path.write_text("port: [unclosed\n")

    settings = load_settings(path)
    assert settings.port == 8000


def test_missing_yaml(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    settings = load_settings(tmp_path / "nope.yaml")
    assert settings.host == "0.0.0.0"
