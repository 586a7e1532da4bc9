"""The access gate: one authentication flow shared by every login endpoint.

Checks run in a fixed order and the first failure wins:

  1. email and password present             -> ValidationError
  2. account exists for the normalized email -> InvalidCredentials
  3. account is active                       -> AccountDeactivated
  4. role matches ``require_role`` (if set)  -> Forbidden
  5. password matches the stored digest      -> InvalidCredentials

Steps 2 and 5 fail with the same error so callers cannot tell an unknown
email from a wrong password. A miss in step 2 still runs the password hasher
against a dummy digest to keep response times equal.

Public login and admin login differ only in ``require_role``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError

from auth.errors import (
    AccountDeactivated,
    Forbidden,
    InvalidCredentials,
    ServerError,
    TokenInvalid,
    UserNotFound,
    ValidationError,
)
from auth.passwords import DUMMY_DIGEST, verify_password
from auth.tokens import decode_claims, issue_token
from config import AuthSettings
from models.user import User, normalize_email
from storage.abstract_storage import AbstractUserStore

MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class LoginResult:
    """A freshly issued session."""

    token: str
    user: User
    expires_in: int

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "token_type": "bearer",
            "expires_in": self.expires_in,
            "user": self.user.to_public_dict(),
        }


class Authenticator:
    """Verify credentials, issue tokens and resolve bearer tokens to users."""

    def __init__(self, settings: AuthSettings, store: AbstractUserStore, logger: logging.Logger):
        self.settings = settings
        self.store = store
        self.logger = logger

    def authenticate(
        self,
        email: str | None,
        password: str | None,
        *,
        require_role: str | None = None,
        now: datetime | None = None,
    ) -> LoginResult:
        """Run the ordered login checks and issue a token on success."""

        normalized = normalize_email(email)
        if not normalized or not (password or "").strip():
            raise ValidationError()

        user = self._lookup(normalized)
        if user is None:
            verify_password(DUMMY_DIGEST, password)
            self.logger.info("Login rejected for %s: unknown email", normalized)
            raise InvalidCredentials()

        if not user.is_active:
            self.logger.info("Login rejected for %s: account deactivated", normalized)
            raise AccountDeactivated()

        if require_role and user.role != require_role:
            self.logger.warning(
                "Login rejected for %s: role %s lacks %s access", normalized, user.role, require_role
            )
            raise Forbidden()

        if not user.check_password(password):
            self.logger.info("Login rejected for %s: wrong password", normalized)
            raise InvalidCredentials()

        now = now or datetime.now(UTC)
        try:
            self.store.record_login(user, now)
        except SQLAlchemyError as exc:
            self.logger.exception("Could not record login for user %s", user.id)
            raise ServerError() from exc

        token = issue_token(user, self.settings, issued_at=now)
        self.logger.info("Login succeeded for user %s (%s)", user.id, user.role)
        return LoginResult(token=token, user=user, expires_in=self.settings.expires_in)

    def resolve_token(self, token: str, *, require_role: str | None = None) -> User:
        """Return the live user behind ``token``.

        The user is re-fetched so deletions, deactivations and role changes
        made after the token was issued take effect immediately.
        """

        claims = decode_claims(token)
        try:
            user_id = int(claims["sub"])
        except (TypeError, ValueError) as exc:
            raise TokenInvalid() from exc

        try:
            user = self.store.get_by_id(user_id)
        except SQLAlchemyError as exc:
            self.logger.exception("User lookup failed for token subject %s", user_id)
            raise ServerError() from exc

        if user is None:
            self.logger.info("Token rejected: user %s no longer exists", user_id)
            raise UserNotFound()
        if not user.is_active:
            self.logger.info("Token rejected: user %s is deactivated", user_id)
            raise AccountDeactivated()
        if require_role and user.role != require_role:
            self.logger.warning("Token rejected: user %s lacks %s access", user_id, require_role)
            raise Forbidden()
        return user

    def change_password(self, user: User, current_password: str | None, new_password: str | None) -> None:
        """Replace the user's password after re-verifying the current one."""

        if not current_password or not (new_password or "").strip():
            raise ValidationError("Current and new passwords are required.")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters long."
            )
        if not user.check_password(current_password):
            self.logger.info("Password change rejected for user %s: wrong password", user.id)
            raise InvalidCredentials("Current password is incorrect.")
        if current_password == new_password:
            raise ValidationError("New password must differ from the current password.")

        try:
            user.set_password(new_password)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        try:
            self.store.save(user)
        except SQLAlchemyError as exc:
            self.logger.exception("Could not save new password for user %s", user.id)
            raise ServerError() from exc
        self.logger.info("Password changed for user %s", user.id)

    def _lookup(self, email: str) -> User | None:
        try:
            return self.store.get_by_email(email)
        except SQLAlchemyError as exc:
            self.logger.exception("User lookup failed for %s", email)
            raise ServerError() from exc
