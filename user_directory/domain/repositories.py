"""
CRC: domain/repositories.py

Name
- Domain Store Interfaces (Protocols)

Responsibilities
- Define the persistence contract the services depend on (port).
- Keep application logic independent from the concrete store.
- Enable straightforward unit testing (mock/wrapped stores).

Collaborators
- domain.entities: User, AuditLogEntry
- infrastructure.repositories.in_memory: InMemoryEntityStore, InMemoryDataStore

Constraints
- Pure interfaces only: no side effects, no infrastructure imports.
- One typed store per entity kind; no reflection-based dispatch.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
- get_all returns a concrete list holding the live stored instances.
"""

from typing import List, Protocol, TypeVar

from .entities import AuditLogEntry, User

T = TypeVar("T")


class EntityStore(Protocol[T]):
    """
    R: Interface for one homogeneous partition of the store.

    Implementations must provide:
      - Identity assignment on create when the entity has none
      - Synchronous persistence visible to the next get_all
      - Identity-matched update/delete
    """

    def get_all(self) -> List[T]:
        """R: Every stored instance (empty list when none)."""
        ...

    def create(self, entity: T) -> T:
        """R: Assign identity if absent and persist."""
        ...

    def update(self, entity: T) -> T:
        """R: Persist an entity already present (identity is the match key)."""
        ...

    def delete(self, entity: T) -> None:
        """R: Remove the stored entity with the same identity."""
        ...


class UserStore(EntityStore[User], Protocol):
    """R: Store partition for User records."""


class AuditLogStore(EntityStore[AuditLogEntry], Protocol):
    """R: Store partition for AuditLogEntry records."""
