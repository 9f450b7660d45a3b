"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from user_service.domain.users.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving users.

    The repository owns the authoritative copy of every user. Users are
    immutable values, so returning them never exposes shared mutable state.
    """

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with ``user_id``, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user whose email equals ``email`` exactly, or None."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored user. Callers must not rely on ordering."""
        raise NotImplementedError

    @abstractmethod
    def create(self, user: User) -> User:
        """Store ``user`` keyed by its ID (upsert, no uniqueness check)."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> User:
        """Store ``user`` keyed by its ID (upsert)."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Remove the user with ``user_id``.

        Returns:
            True if a record existed and was removed, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def create_if_email_absent(self, user: User) -> Optional[User]:
        """Atomically store ``user`` unless its email is already taken.

        Returns:
            The stored user, or None if another user holds the email.
        """
        raise NotImplementedError

    @abstractmethod
    def replace_if_present(self, user: User) -> Optional[User]:
        """Atomically overwrite ``user`` only if its ID is still stored.

        Returns:
            The stored user, or None if the record was deleted meanwhile.
        """
        raise NotImplementedError
