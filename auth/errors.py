"""Authentication error taxonomy.

Every failure is an HTTP exception so the application's JSON error handler
renders it directly. ``kind`` is the machine-readable discriminator clients
switch on; ``description`` is the human-readable message.
"""

from __future__ import annotations

from werkzeug.exceptions import HTTPException


class AuthError(HTTPException):
    """Base class for authentication and authorization failures."""

    code = 401
    kind = "auth_error"
    description = "Authentication failed."


class ValidationError(AuthError):
    code = 400
    kind = "validation_error"
    description = "Email and password are required."


class InvalidCredentials(AuthError):
    """Unknown email or wrong password. The two cases are indistinguishable."""

    code = 401
    kind = "invalid_credentials"
    description = "Invalid email or password."


class AccountDeactivated(AuthError):
    code = 401
    kind = "account_deactivated"
    description = "Account is deactivated."


class Forbidden(AuthError):
    code = 403
    kind = "forbidden"
    description = "Access denied. Admin privileges required."


class TokenInvalid(AuthError):
    code = 401
    kind = "token_invalid"
    description = "Token is not valid."


class TokenExpired(AuthError):
    code = 401
    kind = "token_expired"
    description = "Token has expired."


class UserNotFound(AuthError):
    code = 404
    kind = "user_not_found"
    description = "User not found."


class ServerError(AuthError):
    """Unexpected or persistence failure; detail stays in the server log."""

    code = 500
    kind = "server_error"
    description = "An unexpected error occurred."
