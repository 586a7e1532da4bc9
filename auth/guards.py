"""View decorators that protect routes with a bearer token."""

from __future__ import annotations

from functools import wraps

from flask import Request, current_app, g, request

from auth.errors import TokenInvalid
from auth.service import Authenticator
from models.user import User


def get_authenticator() -> Authenticator:
    """Return the authenticator built for the current application."""
    return current_app.extensions["authenticator"]


def bearer_token(req: Request) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""

    header = req.headers.get("Authorization", "")
    if not header:
        raise TokenInvalid("No token provided, authorization denied.")
    scheme, _, token = header.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise TokenInvalid("Authorization header must be 'Bearer <token>'.")
    return token


def auth_required(role: str | None = None):
    """Require a valid bearer token, and optionally a role, for the view.

    The resolved user is available as ``g.current_user``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token(request)
            g.current_user = get_authenticator().resolve_token(token, require_role=role)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_user() -> User:
    return g.current_user
