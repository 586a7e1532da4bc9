"""Tests for the Flask application factory."""
from __future__ import annotations

from datetime import timedelta

import pytest

from app import create_app
from config import AuthSettings, Config


class _ProductionConfig(Config):
    TESTING = False
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"


def test_health_endpoint_returns_ok(client):
    """The health endpoint should respond with an OK payload."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_blueprints_registered(app):
    """Application factory should register both auth blueprints."""
    assert {"auth", "admin_auth"}.issubset(app.blueprints.keys())


def test_authenticator_built_from_config(app):
    settings = app.extensions["authenticator"].settings
    assert settings.secret_key == app.config["JWT_SECRET_KEY"]
    assert settings.token_ttl == timedelta(hours=24)
    assert app.config["JWT_ACCESS_TOKEN_EXPIRES"] == timedelta(hours=24)


def test_settings_are_immutable():
    settings = AuthSettings(secret_key="x" * 40)
    with pytest.raises(AttributeError):
        settings.secret_key = "y" * 40


def test_settings_read_only_the_jwt_secret():
    """The SECRET_KEY fallback happens once, in Config, not again here."""

    strong = "a-long-and-unpredictable-production-secret"

    assert AuthSettings.from_config({"SECRET_KEY": strong}).secret_key == ""
    assert AuthSettings.from_config(
        {"SECRET_KEY": "session-only", "JWT_SECRET_KEY": strong}
    ).secret_key == strong

    class BlankJwtSecretConfig(_ProductionConfig):
        SECRET_KEY = strong
        JWT_SECRET_KEY = ""

    with pytest.raises(RuntimeError):
        create_app(BlankJwtSecretConfig)


@pytest.mark.parametrize("secret", ["", "change-me", "fallbackSecret", "too-short-secret"])
def test_production_refuses_weak_signing_secret(secret):
    class WeakSecretConfig(_ProductionConfig):
        SECRET_KEY = secret
        JWT_SECRET_KEY = secret

    with pytest.raises(RuntimeError):
        create_app(WeakSecretConfig)


def test_production_accepts_strong_signing_secret():
    class StrongSecretConfig(_ProductionConfig):
        JWT_SECRET_KEY = "a-long-and-unpredictable-production-secret"

    application = create_app(StrongSecretConfig)
    assert application.extensions["authenticator"].settings.expose_error_detail is False


def test_debug_allows_placeholder_secret():
    class DevConfig(_ProductionConfig):
        DEBUG = True
        SECRET_KEY = "change-me"
        JWT_SECRET_KEY = "change-me"

    create_app(DevConfig)


def test_non_positive_token_lifetime_rejected():
    with pytest.raises(RuntimeError):
        AuthSettings(secret_key="x" * 40, token_ttl=timedelta(0)).validate(production=False)
