"""Flask extension instances shared by the application factory and blueprints."""

from flask import current_app
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate

migrate = Migrate()
jwt = JWTManager()
limiter = Limiter(
    get_remote_address,
    default_limits=[lambda: current_app.config.get("RATE_LIMIT", "60 per minute")],
)


def login_rate_limit() -> str:
    return current_app.config.get("LOGIN_RATE_LIMIT", "10 per minute")
