"""
Name: Mutation Locking Tests

Responsibilities:
  - Validate KeyedLock exclusion per key and cleanup of idle keys
  - Validate that concurrent updates of one user leave an audit trail
    consistent with the final state when locking is on
"""

from __future__ import annotations

import threading
import time

import pytest

from user_directory.application import KeyedLock, UserDirectoryService
from user_directory.domain.entities import User
from user_directory.infrastructure.repositories import InMemoryDataStore

pytestmark = pytest.mark.unit


def test_same_key_is_exclusive():
    locks = KeyedLock()
    inside = threading.Event()
    release = threading.Event()
    second_entered = threading.Event()

    def holder():
        with locks.hold(1):
            inside.set()
            release.wait(timeout=5)

    def contender():
        with locks.hold(1):
            second_entered.set()

    t1 = threading.Thread(target=holder)
    t1.start()
    assert inside.wait(timeout=5)

    t2 = threading.Thread(target=contender)
    t2.start()
    assert not second_entered.wait(timeout=0.2)

    release.set()
    t1.join(timeout=5)
    t2.join(timeout=5)
    assert second_entered.is_set()


def test_different_keys_do_not_block():
    locks = KeyedLock()
    entered = threading.Event()

    with locks.hold(1):

        def other():
            with locks.hold(2):
                entered.set()

        t = threading.Thread(target=other)
        t.start()
        assert entered.wait(timeout=5)
        t.join(timeout=5)


def test_idle_keys_are_released():
    locks = KeyedLock()

    with locks.hold("a"):
        assert len(locks) == 1

    assert len(locks) == 0


def test_lock_is_released_on_error():
    locks = KeyedLock()

    with pytest.raises(ValueError):
        with locks.hold(1):
            raise ValueError("boom")

    assert len(locks) == 0
    with locks.hold(1):
        pass


class _SlowStore:
    """Delegating user store that widens the read -> write window."""

    def __init__(self, inner):
        self._inner = inner

    def get_all(self):
        rows = self._inner.get_all()
        time.sleep(0.001)
        return rows

    def create(self, entity):
        return self._inner.create(entity)

    def update(self, entity):
        return self._inner.update(entity)

    def delete(self, entity):
        return self._inner.delete(entity)


def test_concurrent_updates_keep_trail_consistent():
    data = InMemoryDataStore()
    data.users.create(User(id=1, forename="F0", surname="S", is_active=True))
    service = UserDirectoryService(
        _SlowStore(data.users), data.audit_logs, mutation_locks=KeyedLock()
    )

    def worker(n: int) -> None:
        service.update(1, User(forename=f"F{n}", surname="S", is_active=True))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(1, 21)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    logs = [e for e in data.audit_logs.get_all() if e.action == "Forename changed"]
    assert len(logs) == 20
    assert logs[0].previous_value == "F0"
    for before, after in zip(logs, logs[1:]):
        assert after.previous_value == before.new_value
    assert data.users.get_all()[0].forename == logs[-1].new_value
