"""
===============================================================================
CRC CARD: domain/__init__.py
===============================================================================

Module:
    Domain layer exports (public domain API)

Responsibilities:
    - Centralize exports for clean imports in application code.
    - Keep the domain surface area stable.

Rules:
    - Re-exports domain contracts/entities only.
    - Never import infrastructure here.
===============================================================================
"""

from .entities import AuditAction, AuditLogEntry, User
from .repositories import AuditLogStore, EntityStore, UserStore

__all__ = [
    # Entities
    "AuditAction",
    "AuditLogEntry",
    "User",
    # Stores
    "EntityStore",
    "AuditLogStore",
    "UserStore",
]
