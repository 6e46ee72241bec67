"""
Name: Domain Entities

Responsibilities:
  - Define the User roster record and the AuditLogEntry trail record
  - Fix the audit action vocabulary
  - Stay free of persistence and presentation concerns

Collaborators:
  - domain.repositories: EntityStore protocol persists these entities
  - application.change_tracking: diffs User fields into AuditLogEntry rows

Notes:
  - User is mutable (except id); the directory service overwrites fields in place
  - AuditLogEntry.user_id is a weak reference: plain data, never resolved
  - AuditLogEntry.user_name is a display-name snapshot, not a foreign key
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def utc_now() -> datetime:
    """R: Single time source (UTC) for entity defaults."""
    return datetime.now(timezone.utc)


class AuditAction(str, Enum):
    """Fixed vocabulary of audit actions written by the directory service."""

    USER_CREATED = "Created user"
    USER_DELETED = "Deleted user"
    FORENAME_CHANGED = "Forename changed"
    SURNAME_CHANGED = "Surname changed"
    DATE_OF_BIRTH_CHANGED = "Date of birth changed"
    EMAIL_CHANGED = "Email changed"
    ACTIVE_STATUS_CHANGED = "Active status changed"


@dataclass(slots=True)
class User:
    """
    R: Person record in the directory.

    Attributes:
        id: Positive identity, assigned once at creation (None until stored)
        forename: Given name
        surname: Family name
        date_of_birth: Pre-normalized date string, stored verbatim
        email: Contact address
        is_active: Whether the account is active
    """

    id: int | None = None
    forename: str = ""
    surname: str = ""
    date_of_birth: str = ""
    email: str = ""
    is_active: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.forename} {self.surname}"


@dataclass(slots=True)
class AuditLogEntry:
    """
    R: One row of the audit trail.

    Attributes:
        log_id: Store-assigned monotonic identity (None until stored)
        user_id: Id of the user the entry is about (kept after deletion)
        action: One of AuditAction values (not enforced here)
        previous_value: Value before the change ("" when not applicable)
        new_value: Value after the change ("" when not applicable)
        user_name: Display name snapshot at synthesis time
        timestamp: Creation instant (UTC)
    """

    user_id: int
    action: str
    previous_value: str = ""
    new_value: str = ""
    user_name: str = ""
    timestamp: datetime = field(default_factory=utc_now)
    log_id: int | None = None
