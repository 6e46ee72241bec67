"""
Name: Keyed Lock (per-entity mutual exclusion)

Responsibilities:
  - Hand out one lock per key (user id) so mutations of the same user run
    one at a time while different users proceed in parallel
  - Drop a key's lock once nobody holds or waits for it

Collaborators:
  - application.user_service: wraps update/delete in hold(user_id)

Notes:
  - Process-local only; it does not coordinate separate processes.
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Dict, Hashable, Iterator


class _Slot:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = Lock()
        self.users = 0


class KeyedLock:
    """Lock table keyed by an arbitrary hashable."""

    def __init__(self) -> None:
        self._guard = Lock()
        self._slots: Dict[Hashable, _Slot] = {}

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            slot = self._slots.get(key)
            if slot is None:
                slot = self._slots[key] = _Slot()
            slot.users += 1

        try:
            with slot.lock:
                yield
        finally:
            with self._guard:
                slot.users -= 1
                if slot.users == 0:
                    del self._slots[key]

    def __len__(self) -> int:
        """Number of keys currently held or awaited."""
        with self._guard:
            return len(self._slots)
