"""
===============================================================================
APPLICATION SERVICE: Audit Log
===============================================================================

Responsibilities:
  - Raw write of AuditLogEntry rows (no vocabulary validation).
  - User-scoped and global reads, newest first.

Collaborators:
  - AuditLogStore (domain.repositories)

Notes:
  - Ordering: timestamp DESC; ties resolve to the most recently stored row
    first, so the trail is deterministic even with equal timestamps.
  - user_id is plain data: entries of deleted users are still returned.
===============================================================================
"""

from __future__ import annotations

from typing import Iterable, List

from ..domain.entities import AuditLogEntry
from ..domain.repositories import AuditLogStore


class AuditLogService:
    """Read/write access to the audit trail."""

    def __init__(self, log_store: AuditLogStore) -> None:
        self._logs = log_store

    def add_log(self, entry: AuditLogEntry) -> AuditLogEntry:
        return self._logs.create(entry)

    def get_logs_for_user(self, user_id: int) -> List[AuditLogEntry]:
        """Entries about `user_id`, newest first."""
        return self._newest_first(
            e for e in self._logs.get_all() if e.user_id == user_id
        )

    def get_all_logs(self) -> List[AuditLogEntry]:
        """Every entry, newest first."""
        return self._newest_first(self._logs.get_all())

    @staticmethod
    def _newest_first(entries: Iterable[AuditLogEntry]) -> List[AuditLogEntry]:
        """
        R: Sort by (timestamp, insertion position) descending.

        The position breaks timestamp ties in favour of later insertions.
        """
        ordered = sorted(
            enumerate(entries),
            key=lambda item: (item[1].timestamp, item[0]),
            reverse=True,
        )
        return [entry for _, entry in ordered]
