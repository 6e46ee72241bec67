"""
===============================================================================
USER DIRECTORY RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    User Directory Results

Business Goal:
    Give the mutating directory operations an explicit outcome without
    changing their shape for callers that ignore it:
      - success: the affected user and the audit entries written
      - not found: nothing changed, nothing logged, nothing raised

Why (Context):
    - A missing id on update/delete is not an exception: callers that only
      fire-and-forget still see a silent success.
    - Callers that care can read `error` instead of re-querying state.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    user_results models (module)

Responsibilities:
    - Define UserErrorCode.
    - Represent UserError (code + message).
    - Represent UserMutationResult (user + logs + error).

Collaborators:
    - domain.entities.User, AuditLogEntry
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..domain.entities import AuditLogEntry, User


class UserErrorCode(str, Enum):
    """
    Error codes for directory operations.

    Codes:
      - NOT_FOUND: no stored user has the requested id.
    """

    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class UserError:
    code: UserErrorCode
    message: str


@dataclass
class UserMutationResult:
    """
    Outcome of add / update / delete.

    Contract:
      - error is None => user is the affected user, logs are the rows written
      - error != None => user is None and logs is empty
    """

    user: User | None = None
    logs: List[AuditLogEntry] = field(default_factory=list)
    error: UserError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
