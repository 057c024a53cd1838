"""Settings loaded from environment variables (+ optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///todoapp.db"


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 5000
    database_url: str = DEFAULT_DATABASE_URL
    api_url: str = "/api"
    cors_origins: str = "*"
    log_level: str = "INFO"
    debug: bool = False

    @staticmethod
    def from_env(dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(override=False)
        return Settings(
            host=_env("HOST", "0.0.0.0"),
            port=_env_int("PORT", 5000),
            database_url=_env("DATABASE_URL", DEFAULT_DATABASE_URL),
            api_url=_env("API_URL", "/api").rstrip("/") or "/api",
            cors_origins=_env("CORS_ORIGINS", "*"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            debug=_env_bool("FLASK_DEBUG", False),
        )
