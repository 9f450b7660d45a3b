"""Shared fixtures: a fresh store, repository and app per test."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from user_service.core.config import Settings
from user_service.infrastructure.users.in_memory_store import InMemoryUserStore
from user_service.infrastructure.users.user_repository import InMemoryUserRepository
from user_service.main import create_app

T0 = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime = T0) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def repo(store: InMemoryUserStore) -> InMemoryUserRepository:
    return InMemoryUserRepository(store)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def client(settings: Settings, store: InMemoryUserStore) -> TestClient:
    return TestClient(create_app(settings=settings, store=store))
