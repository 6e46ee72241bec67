# =============================================================================
# FILE: infrastructure/repositories/in_memory/entity_store.py
# =============================================================================
"""
============================================================
CRC CARD: infrastructure/repositories/in_memory/entity_store.py
============================================================
Class: InMemoryEntityStore[T]

Responsibilities:
  - Hold one homogeneous partition of entities in memory.
  - Assign integer identities on create (monotonic, never reused).
  - Implement get_all / create / update / delete by identity match.
  - Keep insertion order stable so reads are deterministic.

Collaborators:
  - domain.repositories.EntityStore (contract implemented)
  - crosscutting.exceptions (EntityNotFoundError, DuplicateEntityError,
    InvalidIdentityError)

Constraints / Notes:
  - Thread-safe container: every read/write happens under a Lock.
  - The lock protects the container only; callers get no transaction.
  - get_all returns a new list holding the live stored instances.
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Generic, List, TypeVar

from ....crosscutting.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidIdentityError,
)

T = TypeVar("T")


class InMemoryEntityStore(Generic[T]):
    """
    In-memory, thread-safe store for one entity kind.

    Mental model:
    - _rows is the in-memory "table" (identity -> entity), insertion ordered.
    - _last_id only grows: ids of deleted rows are never handed out again.
    """

    def __init__(self, entity_name: str, *, key: str = "id") -> None:
        self._entity_name = entity_name
        self._key = key
        self._lock = Lock()
        self._rows: Dict[int, T] = {}
        self._last_id = 0

    # =========================================================
    # Internal helpers
    # =========================================================
    def _identity_of(self, entity: T) -> int | None:
        return getattr(entity, self._key)

    def _not_found(self, identity: int | None) -> EntityNotFoundError:
        return EntityNotFoundError(
            f"{self._entity_name} with {self._key}={identity} is not stored."
        )

    # =========================================================
    # Reads
    # =========================================================
    def get_all(self) -> List[T]:
        with self._lock:
            return list(self._rows.values())

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    # =========================================================
    # Writes
    # =========================================================
    def create(self, entity: T) -> T:
        """
        Persist a new entity.

        - identity None/0 => next id is assigned on the instance itself
        - caller-supplied identity is kept and advances the id counter
        - negative identity => InvalidIdentityError, nothing stored
        """
        with self._lock:
            identity = self._identity_of(entity)
            if not identity:
                identity = self._last_id + 1
                setattr(entity, self._key, identity)
            elif identity < 0:
                raise InvalidIdentityError(
                    f"{self._entity_name} with {self._key}={identity}: "
                    "identities are positive integers."
                )
            elif identity in self._rows:
                raise DuplicateEntityError(
                    f"{self._entity_name} with {self._key}={identity} already exists."
                )

            self._last_id = max(self._last_id, identity)
            self._rows[identity] = entity
            return entity

    def update(self, entity: T) -> T:
        with self._lock:
            identity = self._identity_of(entity)
            if identity not in self._rows:
                raise self._not_found(identity)
            self._rows[identity] = entity
            return entity

    def delete(self, entity: T) -> None:
        with self._lock:
            identity = self._identity_of(entity)
            if identity not in self._rows:
                raise self._not_found(identity)
            del self._rows[identity]

    # -------------------------------------------------------------------------
    # Testing helpers
    # -------------------------------------------------------------------------
    def clear(self) -> None:
        """Clear all rows (for testing). The id counter is kept."""
        with self._lock:
            self._rows.clear()
