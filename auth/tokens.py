"""Bearer token issuance and verification.

Tokens are HS256 JWTs produced by flask-jwt-extended and signed with the
application's ``JWT_SECRET_KEY``. The ``sub`` claim holds the user id as a
string; ``email`` and ``role`` ride along as additional claims. ``iat``,
``nbf`` and ``exp`` are written explicitly from the issue time so callers can
issue a token as of a given instant.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import ExpiredSignatureError, PyJWTError

from auth.errors import TokenExpired, TokenInvalid

if TYPE_CHECKING:
    from config import AuthSettings
    from models.user import User


def issue_token(user: User, settings: AuthSettings, issued_at: datetime | None = None) -> str:
    """Return a signed access token for ``user`` valid for ``settings.token_ttl``."""

    issued_at = issued_at or datetime.now(UTC)
    claims = {
        "email": user.email,
        "role": user.role,
        "iat": issued_at,
        "nbf": issued_at,
        "exp": issued_at + settings.token_ttl,
    }
    return create_access_token(
        identity=str(user.id),
        additional_claims=claims,
        expires_delta=settings.token_ttl,
    )


def decode_claims(token: str) -> dict[str, Any]:
    """Verify signature and expiry of ``token`` and return its claims.

    Raises ``TokenExpired`` for an expired token and ``TokenInvalid`` for any
    other defect: bad signature, malformed payload, wrong token type or
    missing identity.
    """

    try:
        claims = decode_token(token)
    except ExpiredSignatureError as exc:
        raise TokenExpired() from exc
    except (PyJWTError, JWTExtendedException) as exc:
        raise TokenInvalid() from exc

    if claims.get("type") != "access" or not claims.get("sub"):
        raise TokenInvalid()
    return claims
