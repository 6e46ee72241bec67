"""
============================================================
CRC CARD: infrastructure/repositories/__init__.py
============================================================
Module: infrastructure.repositories (Public Export Surface)

Responsibilities:
  - Expose the concrete store implementations from one import point.
  - Keep a stable API for the application layer.

Policy:
  - This file holds NO business logic.
  - Re-exports only; no side effects.
============================================================
"""

from .in_memory import InMemoryDataStore, InMemoryEntityStore

__all__ = [
    "InMemoryDataStore",
    "InMemoryEntityStore",
]
