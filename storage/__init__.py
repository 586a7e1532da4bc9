"""Credential storage backends."""

from .abstract_storage import AbstractUserStore
from .database_storage import DatabaseUserStore

__all__ = ["AbstractUserStore", "DatabaseUserStore"]
