"""Application configuration module."""

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Mapping


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    DEBUG = _env_flag("DEBUG")
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///app.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Tokens
    JWT_ACCESS_TOKEN_EXPIRES_HOURS = int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES_HOURS", "24"))
    JWT_TOKEN_LOCATION = ["headers"]

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Error payloads include exception text only when enabled (development)
    EXPOSE_ERROR_DETAIL = _env_flag("EXPOSE_ERROR_DETAIL")

    # CORS
    _raw_origins = os.getenv("ORIGINS", "*")
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]

    # Rate limiting
    RATE_LIMIT = os.getenv("RATE_LIMIT", "60 per minute")
    LOGIN_RATE_LIMIT = os.getenv("LOGIN_RATE_LIMIT", "10 per minute")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")


# Signing secrets that must never reach production.
_PLACEHOLDER_SECRETS = frozenset({"", "change-me", "secret", "dev-secret-key", "fallbackSecret"})
MIN_SECRET_LENGTH = 32


@dataclass(frozen=True)
class AuthSettings:
    """Immutable authentication settings resolved once at application startup."""

    secret_key: str
    token_ttl: timedelta = timedelta(hours=24)
    expose_error_detail: bool = False

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "AuthSettings":
        """Build settings from a Flask config mapping."""

        hours = int(config.get("JWT_ACCESS_TOKEN_EXPIRES_HOURS", 24))
        return cls(
            secret_key=config.get("JWT_SECRET_KEY") or "",
            token_ttl=timedelta(hours=hours),
            expose_error_detail=bool(config.get("EXPOSE_ERROR_DETAIL", False)),
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in whole seconds."""

        return int(self.token_ttl.total_seconds())

    def validate(self, *, production: bool) -> None:
        """Raise ``RuntimeError`` if the settings are unsafe to serve with."""

        if self.token_ttl <= timedelta(0):
            raise RuntimeError("JWT_ACCESS_TOKEN_EXPIRES_HOURS must be positive.")
        if not production:
            return
        if self.secret_key in _PLACEHOLDER_SECRETS or len(self.secret_key) < MIN_SECRET_LENGTH:
            raise RuntimeError(
                "JWT_SECRET_KEY must be set to a non-default value of at least "
                f"{MIN_SECRET_LENGTH} characters outside development."
            )
