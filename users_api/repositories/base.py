"""Persistence port for User records."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from users_api.domain.users import User


class RepositoryError(Exception):
    """Base exception for persistence adapters."""


class EmailConflictError(RepositoryError):
    """Raised by save() when the store rejects a second record for the same e-mail."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email


class UserRepository(ABC):
    """
    Storage contract the user service depends on.

    Each call is atomic on its own; the service never groups several
    writes into one transaction.
    """

    @abstractmethod
    def exists_by_email(self, email: str | None) -> bool:
        """Return True when any stored user has this e-mail."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Insert or replace by id and return the persisted form."""

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored user in the store's stable order."""
