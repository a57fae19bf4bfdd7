"""Load .env and settings.yaml, expose all configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from statsproxy.api.client import ESPN_BASE_URL, NHL_BASE_URL

log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# env var -> settings field
ENV_OVERRIDES = {
    "NHL_API_BASE": "nhl_api_base",
    "ESPN_API_BASE": "espn_api_base",
    "STATSPROXY_HOST": "host",
    "STATSPROXY_PORT": "port",
    "LOG_LEVEL": "log_level",
    "CORS_ORIGINS": "cors_origins",
}


def _load_env() -> None:
    env_path = PROJECT_ROOT / ".env"
    load_dotenv(env_path)


def _load_yaml(settings_path: Path) -> dict:
    if settings_path.exists():
        try:
            with open(settings_path) as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError:
            log.warning("Failed to parse %s, using defaults", settings_path.name)
            return {}
    return {}


class Settings(BaseModel):
    nhl_api_base: str = NHL_BASE_URL
    espn_api_base: str = ESPN_BASE_URL
    request_timeout: float = 15.0
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("nhl_api_base", "espn_api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v


def load_settings(settings_path: Path | None = None) -> Settings:
    _load_env()
    raw = _load_yaml(settings_path or PROJECT_ROOT / "settings.yaml")
    for env_var, field in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            raw[field] = value
    return Settings(**raw)
