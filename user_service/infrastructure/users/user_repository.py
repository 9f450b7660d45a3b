"""
Adapter: User persistence.

Implements the UserRepository port on top of an injected InMemoryUserStore.
"""

from typing import Optional

from user_service.domain.users.entities import User
from user_service.domain.users.ports import UserRepository
from user_service.infrastructure.users.in_memory_store import InMemoryUserStore


class InMemoryUserRepository(UserRepository):
    """Concrete adapter for user persistence.

    Implements the UserRepository port defined in the domain layer.
    Swapping the store for a database only touches this module.
    """

    def __init__(self, store: InMemoryUserStore) -> None:
        self._store = store

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._store.get_user_by_id(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self._store.get_user_by_email(email)

    def find_all(self) -> list[User]:
        return self._store.get_users()

    def create(self, user: User) -> User:
        self._store.save_user(user)
        return user

    def update(self, user: User) -> User:
        self._store.save_user(user)
        return user

    def delete(self, user_id: str) -> bool:
        return self._store.delete_user(user_id)

    def create_if_email_absent(self, user: User) -> Optional[User]:
        if not self._store.insert_if_email_absent(user):
            return None
        return user

    def replace_if_present(self, user: User) -> Optional[User]:
        if not self._store.replace_if_present(user):
            return None
        return user
