"""
In-memory backing store for users.

A process-local mapping from user ID to User. Nothing is persisted;
a restart starts from an empty store. The composition root constructs
one instance and injects it, there is no module-level singleton.

Sync FastAPI endpoints run on a thread pool, so every operation holds
a single lock. That makes each mutation atomic and lets
``insert_if_email_absent`` close the create-user check-then-act race
and ``replace_if_present`` keep an update from resurrecting a deleted
user.
"""

import threading
from typing import Optional

from user_service.domain.users.entities import User


class InMemoryUserStore:
    """Thread-safe dictionary of users keyed by ID."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.RLock()

    def get_users(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._find_by_email(email)

    def save_user(self, user: User) -> None:
        """Create or replace the record for ``user.id``."""
        with self._lock:
            self._users[user.id] = user

    def insert_if_email_absent(self, user: User) -> bool:
        """Store ``user`` unless a different record already holds its email.

        Returns:
            True if the user was stored.
        """
        with self._lock:
            existing = self._find_by_email(user.email)
            if existing is not None and existing.id != user.id:
                return False
            self._users[user.id] = user
            return True

    def replace_if_present(self, user: User) -> bool:
        """Overwrite the record for ``user.id`` only if it still exists.

        Returns:
            True if the record was replaced, False if it is gone.
        """
        with self._lock:
            if user.id not in self._users:
                return False
            self._users[user.id] = user
            return True

    def delete_user(self, user_id: str) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def clear(self) -> None:
        """Remove every user. Intended for tests."""
        with self._lock:
            self._users.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def _find_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None
