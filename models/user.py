"""User model definition."""

from datetime import UTC, datetime

from sqlalchemy.orm import validates

from auth.passwords import hash_password, verify_password

from . import db


ROLES = ("admin", "user")


def normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return (raw_email or "").strip().lower()


class User(db.Model):
    """An account that can sign in to the portfolio API."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(32), nullable=False, default="user")
    is_active = db.Column(
        db.Boolean,
        nullable=False,
        default=True,
        server_default=db.text("true"),
    )
    last_login_at = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(
        db.DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    @validates("email")
    def _normalize_email(self, key: str, value: str | None) -> str:
        email = normalize_email(value)
        if not email:
            raise ValueError("Email is required.")
        return email

    @validates("role")
    def _check_role(self, key: str, value: str) -> str:
        if value not in ROLES:
            raise ValueError(f"Role must be one of: {', '.join(ROLES)}.")
        return value

    def set_password(self, password: str) -> None:
        """Hash and store the password.

        Raises ``ValueError`` when handed this account's own stored digest.
        """

        if self.password_hash and password == self.password_hash:
            raise ValueError("Refusing to hash the stored password digest.")
        self.password_hash = hash_password(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return verify_password(self.password_hash, password)

    def to_public_dict(self) -> dict:
        """Projection returned alongside a freshly issued token."""

        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role}

    def to_dict(self) -> dict:
        """Serialize the account for the current-user endpoints."""

        data = self.to_public_dict()
        data.update(
            {
                "is_active": self.is_active,
                "last_login_at": self.last_login_at.isoformat() if self.last_login_at else None,
                "created_at": self.created_at.isoformat() if self.created_at else None,
            }
        )
        return data

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
