"""Credential store abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.user import User


class AbstractUserStore(ABC):
    """Interface for user persistence backends."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user with the given normalized email, if any."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return the user with the given primary key, if any."""

    @abstractmethod
    def record_login(self, user: User, when: datetime) -> None:
        """Persist ``when`` as the user's last successful login."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist pending changes to ``user``."""
