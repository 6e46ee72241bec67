"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Wrap in-memory stores in Mocks to count store calls
  - Configure test environment

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - user_directory.domain / infrastructure / application

Notes:
  - Fixtures are auto-discovered by pytest
  - Default fixture scope is "function" for per-test isolation
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")

from user_directory.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from user_directory.application import (  # noqa: E402
    AuditLogService,
    UserDirectoryService,
)
from user_directory.domain.entities import User  # noqa: E402
from user_directory.infrastructure.repositories import (  # noqa: E402
    InMemoryEntityStore,
)


class TickingClock:
    """R: Deterministic clock: every call is one second after the previous."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(seconds=1)
        return self.current


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def user_store() -> Mock:
    """R: Real in-memory user partition wrapped to record calls."""
    return Mock(wraps=InMemoryEntityStore("User", key="id"))


@pytest.fixture
def log_store() -> Mock:
    """R: Real in-memory audit partition wrapped to record calls."""
    return Mock(wraps=InMemoryEntityStore("AuditLogEntry", key="log_id"))


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def user_service(user_store: Mock, log_store: Mock, clock: TickingClock):
    return UserDirectoryService(user_store, log_store, clock=clock)


@pytest.fixture
def audit_service(log_store: Mock) -> AuditLogService:
    return AuditLogService(log_store)


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def existing_user() -> User:
    return User(
        id=1,
        forename="OldFirst",
        surname="OldLast",
        date_of_birth="01/01/1990",
        email="old@example.com",
        is_active=True,
    )


@pytest.fixture
def stored_user(user_store: Mock, existing_user: User) -> User:
    """R: existing_user already persisted; store call history reset."""
    user_store.create(existing_user)
    user_store.reset_mock()
    return existing_user
