"""
===============================================================================
APPLICATION LAYER (Public API / Exports)
===============================================================================

Stable entry points of the application layer:
  - UserDirectoryService: user queries and audited mutations
  - AuditLogService: audit trail reads and raw writes
  - UserMutationResult / UserError / UserErrorCode: mutation outcomes
  - KeyedLock: per-user mutual exclusion for mutations
===============================================================================
"""

from .audit_log_service import AuditLogService
from .keyed_lock import KeyedLock
from .user_results import UserError, UserErrorCode, UserMutationResult
from .user_service import UserDirectoryService

__all__ = [
    "AuditLogService",
    "KeyedLock",
    "UserDirectoryService",
    "UserError",
    "UserErrorCode",
    "UserMutationResult",
]
