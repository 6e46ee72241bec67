"""
===============================================================================
CHANGE TRACKING (User field diff -> audit entries)
===============================================================================

Name:
    Change Tracking

Business Goal:
    Turn what happened to a User into the audit rows that describe it:
      - one row when a user is created
      - one row when a user is deleted
      - one row per tracked field whose value changed on update

Why (Context):
    - Audit consumers read the trail in a fixed field order and expect the
      post-update display name on every field row; both are kept exactly.
    - Values are rendered as text the same way on both sides of a change, so
      booleans read "True"/"False".

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    change_tracking (module)

Responsibilities:
    - Declare the tracked fields and their audit actions (TRACKED_FIELDS).
    - Compare two users field by field (diff_users).
    - Build AuditLogEntry rows for create / delete / field changes.

Collaborators:
    - domain.entities: User, AuditLogEntry, AuditAction
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List

from ..domain.entities import AuditAction, AuditLogEntry, User, utc_now

Clock = Callable[[], datetime]

# Order is part of the contract: logs are written in this order.
TRACKED_FIELDS: tuple[tuple[str, AuditAction], ...] = (
    ("forename", AuditAction.FORENAME_CHANGED),
    ("surname", AuditAction.SURNAME_CHANGED),
    ("date_of_birth", AuditAction.DATE_OF_BIRTH_CHANGED),
    ("email", AuditAction.EMAIL_CHANGED),
    ("is_active", AuditAction.ACTIVE_STATUS_CHANGED),
)


@dataclass(frozen=True, slots=True)
class FieldChange:
    """One tracked field whose stored value differs from the incoming one."""

    field: str
    action: AuditAction
    previous_value: str
    new_value: str


def render_value(value: Any) -> str:
    """Render a field value for the audit trail (None -> "")."""
    if value is None:
        return ""
    return str(value)


def display_name(forename: str, surname: str) -> str:
    return f"{forename} {surname}"


def diff_users(existing: User, incoming: User) -> List[FieldChange]:
    """
    Compare tracked fields of `existing` against `incoming`.

    Returns the differing fields in TRACKED_FIELDS order (empty if none).
    """
    changes: List[FieldChange] = []
    for field_name, action in TRACKED_FIELDS:
        before = getattr(existing, field_name)
        after = getattr(incoming, field_name)
        if before != after:
            changes.append(
                FieldChange(
                    field=field_name,
                    action=action,
                    previous_value=render_value(before),
                    new_value=render_value(after),
                )
            )
    return changes


def apply_tracked_fields(target: User, source: User) -> None:
    """Overwrite every tracked field of `target` with `source` (changed or not)."""
    for field_name, _ in TRACKED_FIELDS:
        setattr(target, field_name, getattr(source, field_name))


def build_created_log(user: User, *, clock: Clock = utc_now) -> AuditLogEntry:
    name = user.full_name
    return AuditLogEntry(
        user_id=user.id,
        action=AuditAction.USER_CREATED.value,
        previous_value="",
        new_value=f"User {name} was created with email {user.email}",
        user_name=name,
        timestamp=clock(),
    )


def build_deleted_log(user: User, *, clock: Clock = utc_now) -> AuditLogEntry:
    name = user.full_name
    return AuditLogEntry(
        user_id=user.id,
        action=AuditAction.USER_DELETED.value,
        previous_value=f"User {name} with email {user.email} was deleted",
        new_value="",
        user_name=name,
        timestamp=clock(),
    )


def build_change_logs(
    user_id: int,
    changes: List[FieldChange],
    *,
    user_name: str,
    clock: Clock = utc_now,
) -> List[AuditLogEntry]:
    """One entry per change, all stamped with the same `user_name`."""
    return [
        AuditLogEntry(
            user_id=user_id,
            action=change.action.value,
            previous_value=change.previous_value,
            new_value=change.new_value,
            user_name=user_name,
            timestamp=clock(),
        )
        for change in changes
    ]
