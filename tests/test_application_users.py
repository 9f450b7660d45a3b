"""
Tests for the users application layer (use cases).

Use cases run against the in-memory repository with a fake clock.
Each test verifies orchestration and the returned Result, not HTTP.
"""

import threading
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from user_service.application.result import Result
from user_service.application.users.create_user import (
    CreateUserUseCase,
    generate_user_id,
)
from user_service.application.users.delete_user import DeleteUserUseCase
from user_service.application.users.dtos import (
    CreateUserCommand,
    UpdateUserCommand,
    UserResult,
    isoformat,
)
from user_service.application.users.get_all_users import GetAllUsersUseCase
from user_service.application.users.get_user import GetUserUseCase
from user_service.application.users.update_user import UpdateUserUseCase
from user_service.domain.users.entities import User
from user_service.domain.users.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from user_service.infrastructure.users.user_repository import InMemoryUserRepository

T0 = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


def _create(repo, clock, email: str = "a@b.com", name: str = "A") -> UserResult:
    result = CreateUserUseCase(repo, clock=clock).execute(
        CreateUserCommand(email=email, name=name)
    )
    assert result.is_ok, result.error
    return result.value


class TestResult:
    """Tests for the tagged Result type."""

    def test_success_and_failure(self) -> None:
        ok = Result.success(1)
        assert ok.is_ok and ok.value == 1 and ok.error is None
        error = NotFoundError("x")
        failed = Result.failure(error)
        assert not failed.is_ok and failed.error is error


class TestCreateUserUseCase:
    """Tests for the CreateUserUseCase."""

    def test_creates_user(self, repo: InMemoryUserRepository, clock) -> None:
        user = _create(repo, clock, email="john@example.com", name="John")
        assert user.email == "john@example.com"
        assert user.name == "John"
        assert user.created_at == user.updated_at == isoformat(T0)
        assert user.id.startswith("user_")
        assert repo.find_by_id(user.id) is not None

    def test_create_then_get_round_trip(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        created = _create(repo, clock, email="x@y.org", name="X")
        fetched = GetUserUseCase(repo).execute(created.id)
        assert fetched.is_ok
        assert fetched.value == created
        assert fetched.value.created_at == fetched.value.updated_at

    def test_duplicate_email_conflicts(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        _create(repo, clock, email="a@b.com", name="A")
        result = CreateUserUseCase(repo, clock=clock).execute(
            CreateUserCommand(email="A@B.COM", name="B")
        )
        assert isinstance(result.error, ConflictError)
        assert len(repo.find_all()) == 1

    def test_invalid_email_fails_validation(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        result = CreateUserUseCase(repo, clock=clock).execute(
            CreateUserCommand(email="not-an-email", name="A")
        )
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "email"
        assert repo.find_all() == []

    def test_invalid_name_fails_validation(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        result = CreateUserUseCase(repo, clock=clock).execute(
            CreateUserCommand(email="a@b.com", name=" ")
        )
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "name"

    def test_lost_race_reports_conflict(self, clock) -> None:
        """The atomic insert still rejects a duplicate the lookup missed."""
        repo = MagicMock()
        repo.find_by_email.return_value = None
        repo.create_if_email_absent.return_value = None
        result = CreateUserUseCase(repo, clock=clock).execute(
            CreateUserCommand(email="a@b.com", name="A")
        )
        assert isinstance(result.error, ConflictError)

    def test_concurrent_creates_same_email(self, repo: InMemoryUserRepository) -> None:
        workers = 8
        barrier = threading.Barrier(workers)
        results: list[Result] = []
        lock = threading.Lock()
        use_case = CreateUserUseCase(repo)

        def create() -> None:
            barrier.wait()
            result = use_case.execute(CreateUserCommand(email="race@b.com", name="R"))
            with lock:
                results.append(result)

        threads = [threading.Thread(target=create) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        successes = [r for r in results if r.is_ok]
        conflicts = [r for r in results if isinstance(r.error, ConflictError)]
        assert len(successes) == 1
        assert len(conflicts) == workers - 1
        assert len(repo.find_all()) == 1

    def test_generated_ids_are_unique(self) -> None:
        ids = {generate_user_id() for _ in range(500)}
        assert len(ids) == 500


class TestGetUserUseCase:
    """Tests for the GetUserUseCase."""

    def test_missing_user(self, repo: InMemoryUserRepository) -> None:
        result = GetUserUseCase(repo).execute("nope")
        assert isinstance(result.error, NotFoundError)


class TestGetAllUsersUseCase:
    """Tests for the GetAllUsersUseCase."""

    def test_empty_store(self, repo: InMemoryUserRepository) -> None:
        result = GetAllUsersUseCase(repo).execute()
        assert result.is_ok
        assert result.value == []

    def test_returns_every_created_user(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        created = [
            _create(repo, clock, email=f"user{i}@b.com", name=f"User {i}")
            for i in range(5)
        ]
        result = GetAllUsersUseCase(repo).execute()
        assert len(result.value) == 5
        assert sorted(result.value, key=lambda u: u.id) == sorted(
            created, key=lambda u: u.id
        )


class TestUpdateUserUseCase:
    """Tests for the UpdateUserUseCase."""

    def test_updates_name_and_timestamp(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        created = _create(repo, clock)
        result = UpdateUserUseCase(repo, clock=clock).execute(
            created.id, UpdateUserCommand(name="X")
        )
        assert result.is_ok
        assert result.value.name == "X"
        assert result.value.updated_at > created.updated_at
        assert result.value.created_at == created.created_at
        assert repo.find_by_id(created.id).name == "X"

    def test_strict_increase_with_real_clock(self, repo: InMemoryUserRepository) -> None:
        created = CreateUserUseCase(repo).execute(
            CreateUserCommand(email="a@b.com", name="A")
        ).value
        updated = UpdateUserUseCase(repo).execute(
            created.id, UpdateUserCommand(name="B")
        ).value
        assert updated.updated_at > created.updated_at

    def test_omitted_name_changes_nothing(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        created = _create(repo, clock)
        result = UpdateUserUseCase(repo, clock=clock).execute(
            created.id, UpdateUserCommand()
        )
        assert result.value == created

    def test_omitted_name_does_not_write(self, clock) -> None:
        repo = MagicMock()
        repo.find_by_id.return_value = User(
            id="u1", email="a@b.com", name="A", created_at=T0, updated_at=T0
        )
        result = UpdateUserUseCase(repo, clock=clock).execute("u1", UpdateUserCommand())
        assert result.is_ok
        repo.update.assert_not_called()
        repo.replace_if_present.assert_not_called()

    def test_missing_user(self, repo: InMemoryUserRepository, clock) -> None:
        result = UpdateUserUseCase(repo, clock=clock).execute(
            "nope", UpdateUserCommand(name="X")
        )
        assert isinstance(result.error, NotFoundError)

    def test_invalid_name_keeps_stored_user(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        created = _create(repo, clock)
        result = UpdateUserUseCase(repo, clock=clock).execute(
            created.id, UpdateUserCommand(name="x" * 101)
        )
        assert isinstance(result.error, ValidationError)
        assert repo.find_by_id(created.id).name == created.name

    def test_concurrent_delete_is_not_undone(self, store, clock) -> None:
        """A delete landing between lookup and write must stick."""

        class DeleteAfterLookup(InMemoryUserRepository):
            def find_by_id(self, user_id: str):
                user = super().find_by_id(user_id)
                self.delete(user_id)
                return user

        InMemoryUserRepository(store).create(
            User(id="u1", email="a@b.com", name="A", created_at=T0, updated_at=T0)
        )
        result = UpdateUserUseCase(DeleteAfterLookup(store), clock=clock).execute(
            "u1", UpdateUserCommand(name="C")
        )
        assert isinstance(result.error, NotFoundError)
        assert store.count() == 0


class TestDeleteUserUseCase:
    """Tests for the DeleteUserUseCase."""

    def test_delete_then_delete_again(
        self, repo: InMemoryUserRepository, clock
    ) -> None:
        created = _create(repo, clock)
        use_case = DeleteUserUseCase(repo)

        first = use_case.execute(created.id)
        assert first.is_ok and first.value.success is True

        second = use_case.execute(created.id)
        assert isinstance(second.error, NotFoundError)

    def test_missing_user(self, repo: InMemoryUserRepository) -> None:
        assert isinstance(DeleteUserUseCase(repo).execute("nope").error, NotFoundError)


class TestIsoformat:
    """Tests for timestamp rendering in DTOs."""

    def test_utc_suffix(self) -> None:
        assert isoformat(T0) == "2025-01-15T10:30:00.000000Z"

    def test_microseconds_preserved(self) -> None:
        assert isoformat(T0 + timedelta(microseconds=1)).endswith(".000001Z")
