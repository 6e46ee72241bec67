"""
Name: Dev Seed Users (demo roster)

Responsibilities:
  - Load the demo roster (11 users, ids 1-11) into the user store
  - Keep the operation idempotent (safe to run multiple times)

Patterns:
  - Task orchestration (seed task)
  - Dependency Injection (store injected)
  - Idempotent provisioning (skip ids already present)

CRC:
  Component: ensure_demo_users
  Responsibilities:
    - Create each missing demo user directly in the store
  Collaborators:
    - UserStore (get_all/create)
  Constraints:
    - Goes straight to the store: seeding writes no audit entries
    - The roster is a fixture for demos and tests, not an enforced contract
"""

from __future__ import annotations

from dataclasses import dataclass

from ..crosscutting.logger import logger
from ..domain.entities import User
from ..domain.repositories import UserStore


@dataclass(frozen=True, slots=True)
class _SeedUserSpec:
    """R: Declarative user seed spec (no side effects)."""

    id: int
    forename: str
    surname: str
    date_of_birth: str
    email: str
    is_active: bool

    def to_user(self) -> User:
        return User(
            id=self.id,
            forename=self.forename,
            surname=self.surname,
            date_of_birth=self.date_of_birth,
            email=self.email,
            is_active=self.is_active,
        )


DEMO_USERS: tuple[_SeedUserSpec, ...] = (
    _SeedUserSpec(1, "Peter", "Loew", "01/01/2000", "ploew@example.com", True),
    _SeedUserSpec(2, "Benjamin Franklin", "Gates", "02/01/2000", "bfgates@example.com", True),
    _SeedUserSpec(3, "Castor", "Troy", "03/01/2000", "ctroy@example.com", False),
    _SeedUserSpec(4, "Memphis", "Raines", "04/01/2000", "mraines@example.com", True),
    _SeedUserSpec(5, "Stanley", "Goodspeed", "05/01/2000", "sgodspeed@example.com", True),
    _SeedUserSpec(6, "H.I.", "McDunnough", "06/01/2000", "himcdunnough@example.com", True),
    _SeedUserSpec(7, "Cameron", "Poe", "07/01/2000", "cpoe@example.com", False),
    _SeedUserSpec(8, "Edward", "Malus", "08/01/2000", "emalus@example.com", False),
    _SeedUserSpec(9, "Damon", "Macready", "09/01/2000", "dmacready@example.com", False),
    _SeedUserSpec(10, "Johnny", "Blaze", "10/01/2000", "jblaze@example.com", True),
    _SeedUserSpec(11, "Robin", "Feld", "11/01/2000", "rfeld@example.com", True),
)


def ensure_demo_users(user_store: UserStore) -> int:
    """
    Ensure every demo user exists.

    Returns:
        Number of users created by this call
    """
    existing_ids = {u.id for u in user_store.get_all()}
    created = 0

    for spec in DEMO_USERS:
        if spec.id in existing_ids:
            continue
        user_store.create(spec.to_user())
        created += 1

    logger.info(
        "Dev seed users: roster ensured",
        extra={
            "created_count": created,
            "skipped_count": len(DEMO_USERS) - created,
        },
    )
    return created
