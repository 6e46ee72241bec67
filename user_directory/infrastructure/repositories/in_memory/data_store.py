"""
In-Memory Data Store for the directory.

Groups one typed partition per entity kind. Data is lost on process restart.
"""

from __future__ import annotations

from ....domain.entities import AuditLogEntry, User
from .entity_store import InMemoryEntityStore


class InMemoryDataStore:
    """
    Type-partitioned in-memory store.

    Useful for:
      - Local development and demos
      - Unit and integration tests
    """

    def __init__(self) -> None:
        self.users: InMemoryEntityStore[User] = InMemoryEntityStore("User", key="id")
        self.audit_logs: InMemoryEntityStore[AuditLogEntry] = InMemoryEntityStore(
            "AuditLogEntry", key="log_id"
        )

    def clear(self) -> None:
        """Clear every partition (for testing)."""
        self.users.clear()
        self.audit_logs.clear()
