"""
===============================================================================
APPLICATION SERVICE: User Directory
===============================================================================

Name:
    User Directory Service

Business Goal:
    Read, filter, create, update and delete roster records, writing an audit
    entry for everything that changes.

Why (Context):
    - Every successful mutation leaves a trail fully determined by what
      changed: 1 row for create, 1 for delete, 0..5 for update.
    - A missing id on update/delete changes nothing and logs nothing; the
      returned result says NOT_FOUND but no exception is raised.
    - Store failures are not caught here: they reach the caller unchanged.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UserDirectoryService

Responsibilities:
    - Query users (all / by active flag / by id).
    - Persist users and synthesize their audit rows.
    - Serialize update/delete per user id when a KeyedLock is supplied.

Collaborators:
    - UserStore / AuditLogStore (domain.repositories)
    - change_tracking: diff + audit row builders
    - KeyedLock: per-id mutual exclusion
    - user_results: UserMutationResult / UserError / UserErrorCode
===============================================================================
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import ContextManager, List

from ..context import operation_scope
from ..crosscutting.logger import logger
from ..domain.entities import AuditLogEntry, User, utc_now
from ..domain.repositories import AuditLogStore, UserStore
from .change_tracking import (
    Clock,
    apply_tracked_fields,
    build_change_logs,
    build_created_log,
    build_deleted_log,
    diff_users,
    display_name,
)
from .keyed_lock import KeyedLock
from .user_results import UserError, UserErrorCode, UserMutationResult


class UserDirectoryService:
    """
    Application service over User records and their audit trail.
    """

    def __init__(
        self,
        user_store: UserStore,
        log_store: AuditLogStore,
        *,
        clock: Clock = utc_now,
        mutation_locks: KeyedLock | None = None,
    ) -> None:
        self._users = user_store
        self._logs = log_store
        self._clock = clock
        self._locks = mutation_locks

    # =========================================================================
    # Queries
    # =========================================================================

    def get_all(self) -> List[User]:
        """Every stored user. The instances are live, see `get_by_id`."""
        return list(self._users.get_all())

    def filter_by_active(self, is_active: bool) -> List[User]:
        """Return users whose active flag equals `is_active`."""
        return [u for u in self._users.get_all() if u.is_active == is_active]

    def get_by_id(self, user_id: int) -> User | None:
        """
        Return the stored instance itself, not a copy.

        Editing it in place bypasses change tracking: passing that same
        object to `update` diffs it against itself and writes no audit rows.
        Build a fresh `User` (or copy with `dataclasses.replace`) to edit.
        """
        return self._find(user_id)

    # =========================================================================
    # Commands
    # =========================================================================

    def add(self, user: User) -> UserMutationResult:
        """
        Persist a new user and write its "Created user" entry.

        The store assigns `user.id` when the caller leaves it None.
        """
        with operation_scope("users.add"):
            self._users.create(user)
            entry = build_created_log(user, clock=self._clock)
            self._persist_logs([entry])

            logger.info("User created", extra={"user_id": user.id})
            return UserMutationResult(user=user, logs=[entry])

    def update(self, user_id: int, updated_user: User) -> UserMutationResult:
        """
        Overwrite the tracked fields of user `user_id` with `updated_user`.

        Rules:
          - One audit entry per differing field, in tracked-field order.
          - Every entry carries the post-update display name.
          - The store update runs even when nothing differs.
          - `updated_user.id` is ignored.
          - `updated_user` must not be the stored instance (see get_by_id).
        """
        with self._guard(user_id), operation_scope("users.update"):
            existing = self._find(user_id)
            if existing is None:
                return self._not_found(user_id)

            changes = diff_users(existing, updated_user)
            entries = build_change_logs(
                user_id,
                changes,
                user_name=display_name(updated_user.forename, updated_user.surname),
                clock=self._clock,
            )

            apply_tracked_fields(existing, updated_user)
            self._users.update(existing)
            self._persist_logs(entries)

            logger.info(
                "User updated",
                extra={
                    "user_id": user_id,
                    "changed_fields": [c.field for c in changes],
                },
            )
            return UserMutationResult(user=existing, logs=entries)

    def delete(self, user_id: int) -> UserMutationResult:
        """Remove user `user_id` and write its "Deleted user" entry."""
        with self._guard(user_id), operation_scope("users.delete"):
            existing = self._find(user_id)
            if existing is None:
                return self._not_found(user_id)

            self._users.delete(existing)
            entry = build_deleted_log(existing, clock=self._clock)
            self._persist_logs([entry])

            logger.info("User deleted", extra={"user_id": user_id})
            return UserMutationResult(user=existing, logs=[entry])

    # =========================================================================
    # Private helpers
    # =========================================================================

    def _find(self, user_id: int) -> User | None:
        return next((u for u in self._users.get_all() if u.id == user_id), None)

    def _guard(self, user_id: int) -> ContextManager[None]:
        if self._locks is None:
            return nullcontext()
        return self._locks.hold(user_id)

    def _persist_logs(self, entries: List[AuditLogEntry]) -> None:
        for entry in entries:
            self._logs.create(entry)

    @staticmethod
    def _not_found(user_id: int) -> UserMutationResult:
        logger.info("User not found; nothing changed", extra={"user_id": user_id})
        return UserMutationResult(
            error=UserError(
                code=UserErrorCode.NOT_FOUND,
                message=f"User {user_id} not found.",
            )
        )
