"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _codes(raw: str) -> tuple[str, ...]:
    return tuple(code.strip() for code in raw.split(",") if code.strip())


@dataclass(frozen=True)
class ApiConfig:
    """Content backend connection settings."""

    base_url: str = field(
        default_factory=lambda: _env("SHOWCASE_API_URL", "http://localhost:4000")
    )
    token: str = field(default_factory=lambda: _env("SHOWCASE_API_TOKEN"))
    timeout_seconds: float = field(
        default_factory=lambda: float(_env("SHOWCASE_API_TIMEOUT", "10"))
    )


@dataclass(frozen=True)
class LanguageConfig:
    """Languages every translation set is backfilled with."""

    codes: tuple[str, ...] = field(
        default_factory=lambda: _codes(_env("SHOWCASE_LANGUAGES", "en,fr,tr"))
    )


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE"))
    host: str = field(default_factory=lambda: _env("APP_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("APP_PORT", "8000")))
    session_ttl_seconds: float = field(
        default_factory=lambda: float(_env("SHOWCASE_SESSION_TTL", "3600"))
    )

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    """Top-level settings container."""

    api: ApiConfig = field(default_factory=ApiConfig)
    languages: LanguageConfig = field(default_factory=LanguageConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the environment."""
    return Settings()
