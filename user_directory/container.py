"""
===============================================================================
CRC CARD: user_directory/container.py (Composition Root / manual DI)
===============================================================================

Responsibilities:
  - Compose dependencies (stores, lock table, services) following DIP.
  - Expose factories for the presentation layer and scripts.
  - Keep singletons cached (lru_cache) so every caller shares one store.
  - Centralize runtime decisions based on Settings.

Collaborators:
  - crosscutting.config.get_settings
  - infrastructure.repositories.InMemoryDataStore
  - application.* (services, seed task)

Notes:
  - This file holds NO business logic.
  - Tests call reset_container() to drop cached singletons.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application import AuditLogService, KeyedLock, UserDirectoryService
from .application.dev_seed_users import ensure_demo_users
from .crosscutting.config import get_settings
from .infrastructure.repositories import InMemoryDataStore


@lru_cache
def get_data_store() -> InMemoryDataStore:
    """Process-wide store, seeded with the demo roster when configured."""
    store = InMemoryDataStore()
    if get_settings().seed_demo_users:
        ensure_demo_users(store.users)
    return store


@lru_cache
def get_mutation_locks() -> KeyedLock | None:
    if not get_settings().user_mutation_locking:
        return None
    return KeyedLock()


@lru_cache
def get_user_directory_service() -> UserDirectoryService:
    store = get_data_store()
    return UserDirectoryService(
        store.users,
        store.audit_logs,
        mutation_locks=get_mutation_locks(),
    )


@lru_cache
def get_audit_log_service() -> AuditLogService:
    return AuditLogService(get_data_store().audit_logs)


def reset_container() -> None:
    """Drop cached singletons (settings included)."""
    get_settings.cache_clear()
    get_data_store.cache_clear()
    get_mutation_locks.cache_clear()
    get_user_directory_service.cache_clear()
    get_audit_log_service.cache_clear()
