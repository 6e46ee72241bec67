# user_directory/crosscutting/exceptions.py
"""
===============================================================================
MODULE: Typed store exceptions
===============================================================================

Goal
----
Keep store failures consistent, with:
- a stable error_code
- an error_id for log correlation
- a human message (no personal data)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  DirectoryError + subclasses

Responsibilities:
  - Name each store-level failure with its own error_code
  - Generate error_id for tracing

Collaborators:
  - infrastructure/repositories/in_memory/entity_store.py (raises)
  - application/user_service.py (lets them propagate)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class DirectoryError(Exception):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      DirectoryError

    Responsibilities:
      - Base for internal errors of the directory core
      - Provide error_code + error_id + message
    ----------------------------------------------------------------------------
    """

    error_code: str = "DIRECTORY_ERROR"

    def __init__(self, message: str, error_id: str | None = None):
        self.message = message
        self.error_id = error_id or str(uuid4())
        super().__init__(message)


class StoreError(DirectoryError):
    """Store failures (unavailable, corrupted partition, bad identity)."""

    error_code: str = "STORE_ERROR"


class EntityNotFoundError(StoreError):
    """update/delete addressed an identity the store does not hold."""

    error_code: str = "ENTITY_NOT_FOUND"


class DuplicateEntityError(StoreError):
    """create was given an identity that is already stored."""

    error_code: str = "DUPLICATE_ENTITY"


class InvalidIdentityError(StoreError):
    """create was given a caller-supplied identity below 1."""

    error_code: str = "INVALID_IDENTITY"
