"""Authentication blueprints for the public site and the admin panel.

Both blueprints drive the same ``Authenticator``; the admin variant only adds
``require_role="admin"``. Logout is an acknowledgment: tokens are stateless
and stay valid until they expire.
"""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, jsonify, request

from auth.guards import auth_required, current_user, get_authenticator
from extensions import limiter, login_rate_limit
from utils.request_validation import parse_json_request, string_field

auth_bp = Blueprint("auth", __name__)
admin_auth_bp = Blueprint("admin_auth", __name__)


def _login(require_role: str | None) -> tuple:
    payload = parse_json_request(request, allow_empty=True)
    result = get_authenticator().authenticate(
        string_field(payload, "email"),
        string_field(payload, "password"),
        require_role=require_role,
    )
    response = jsonify(result.to_dict())
    response.headers["Cache-Control"] = "no-store"
    return response, HTTPStatus.OK


def _me() -> tuple:
    return jsonify({"user": current_user().to_dict()}), HTTPStatus.OK


def _logout() -> tuple:
    return jsonify({"message": "Logout successful."}), HTTPStatus.OK


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(login_rate_limit)
def login() -> tuple:
    """Authenticate any active user and return a bearer token."""
    return _login(require_role=None)


@auth_bp.route("/me", methods=["GET"])
@auth_required()
def me() -> tuple:
    """Return the account behind the presented token."""
    return _me()


@auth_bp.route("/verify", methods=["GET"])
@auth_required()
def verify() -> tuple:
    """Session check used by the admin panel on page load; same as /me."""
    return _me()


@auth_bp.route("/logout", methods=["POST"])
def logout() -> tuple:
    return _logout()


@auth_bp.route("/password", methods=["POST"])
@auth_required()
def change_password() -> tuple:
    """Replace the current user's password."""
    payload = parse_json_request(request, allow_empty=True)
    get_authenticator().change_password(
        current_user(),
        string_field(payload, "current_password"),
        string_field(payload, "new_password"),
    )
    return jsonify({"message": "Password updated."}), HTTPStatus.OK


@auth_bp.route("/health", methods=["GET"])
def auth_health() -> tuple:
    return jsonify({"status": "ok"}), HTTPStatus.OK


@admin_auth_bp.route("/login", methods=["POST"])
@limiter.limit(login_rate_limit)
def admin_login() -> tuple:
    """Authenticate an active admin and return a bearer token."""
    return _login(require_role="admin")


@admin_auth_bp.route("/me", methods=["GET"])
@auth_required(role="admin")
def admin_me() -> tuple:
    return _me()


@admin_auth_bp.route("/logout", methods=["POST"])
def admin_logout() -> tuple:
    return _logout()
