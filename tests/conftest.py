"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402

TEST_SECRET = "test-signing-secret-0123456789abcdef"


class _BaseTestConfig(Config):
    TESTING = True
    DEBUG = False
    SECRET_KEY = TEST_SECRET
    JWT_SECRET_KEY = TEST_SECRET
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    EXPOSE_ERROR_DETAIL = False
    CORS_ORIGINS = "*"
    RATE_LIMIT = "1000 per minute"
    LOGIN_RATE_LIMIT = "1000 per minute"


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_BaseTestConfig)

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def db_session(app: Flask):
    """Keep an application context open so tests share the request session."""

    with app.app_context():
        yield db.session


@pytest.fixture()
def authenticator(app: Flask):
    return app.extensions["authenticator"]
