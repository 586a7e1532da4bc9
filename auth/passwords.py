"""Password digest helpers backed by werkzeug's salted key-derivation hashes."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(plain: str) -> str:
    """Return a salted digest for ``plain``.

    Any non-empty string is accepted as a password, including one that happens
    to look like a digest. Guarding a stored digest against a second hash is
    ``User.set_password``'s job.
    """

    if not plain:
        raise ValueError("Password must not be empty.")
    return generate_password_hash(plain)


def verify_password(digest: str | None, plain: str) -> bool:
    """Check ``plain`` against ``digest`` using a constant-time comparison."""

    if not digest or not plain:
        return False
    try:
        return check_password_hash(digest, plain)
    except ValueError:
        # Unknown hash method in a corrupt or foreign digest.
        return False


# Verified against when an email is unknown so lookups that miss take as long
# as a real password check.
DUMMY_DIGEST = generate_password_hash("portfolio-timing-equalizer")
