"""
In-Memory Store Implementations.

For tests, demos and local development.
Data is lost on process restart.
"""

from .data_store import InMemoryDataStore
from .entity_store import InMemoryEntityStore

__all__ = [
    "InMemoryDataStore",
    "InMemoryEntityStore",
]
