"""SQLAlchemy-backed user store."""

from __future__ import annotations

from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from models.user import User

from .abstract_storage import AbstractUserStore


class DatabaseUserStore(AbstractUserStore):
    """Read and write users through the Flask-SQLAlchemy session."""

    def __init__(self, database: SQLAlchemy):
        self.db = database

    def get_by_email(self, email: str) -> User | None:
        # Case-insensitive lookup
        return User.query.filter(func.lower(User.email) == email).first()

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.session.get(User, user_id)

    def record_login(self, user: User, when: datetime) -> None:
        user.last_login_at = when
        self._commit()

    def save(self, user: User) -> None:
        self.db.session.add(user)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.session.commit()
        except SQLAlchemyError:
            self.db.session.rollback()
            raise
