"""
Name: In-Memory Store Tests

Responsibilities:
  - Validate identity assignment (monotonic, never reused)
  - Validate get_all / update / delete semantics and error cases
  - Validate the type-partitioned data store
"""

from __future__ import annotations

import pytest

from user_directory.crosscutting.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidIdentityError,
    StoreError,
)
from user_directory.domain.entities import AuditLogEntry, User
from user_directory.infrastructure.repositories import (
    InMemoryDataStore,
    InMemoryEntityStore,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def store() -> InMemoryEntityStore[User]:
    return InMemoryEntityStore("User", key="id")


class TestCreate:
    def test_empty_store_returns_empty_list(self, store):
        assert store.get_all() == []
        assert store.count() == 0

    def test_create_assigns_sequential_ids(self, store):
        first = store.create(User(forename="A"))
        second = store.create(User(forename="B"))

        assert (first.id, second.id) == (1, 2)

    def test_zero_id_is_treated_as_absent(self, store):
        user = store.create(User(id=0, forename="A"))

        assert user.id == 1

    def test_created_entity_is_visible_immediately(self, store):
        user = store.create(User(forename="A"))

        assert store.get_all() == [user]
        assert store.get_all()[0] is user

    def test_caller_supplied_id_is_kept_and_advances_counter(self, store):
        store.create(User(id=10, forename="A"))
        nxt = store.create(User(forename="B"))

        assert nxt.id == 11

    def test_ids_of_deleted_entities_are_not_reused(self, store):
        a = store.create(User(forename="A"))
        b = store.create(User(forename="B"))
        store.delete(b)

        c = store.create(User(forename="C"))

        assert a.id == 1
        assert c.id == 3

    def test_duplicate_identity_is_rejected(self, store):
        store.create(User(id=1, forename="A"))

        with pytest.raises(DuplicateEntityError) as exc_info:
            store.create(User(id=1, forename="B"))

        assert isinstance(exc_info.value, StoreError)
        assert exc_info.value.error_code == "DUPLICATE_ENTITY"

    def test_negative_identity_is_rejected(self, store):
        with pytest.raises(InvalidIdentityError, match="id=-5") as exc_info:
            store.create(User(id=-5, forename="Neg"))

        assert isinstance(exc_info.value, StoreError)
        assert exc_info.value.error_code == "INVALID_IDENTITY"
        assert store.get_all() == []
        assert store.create(User(forename="Next")).id == 1

    def test_store_errors_carry_distinct_error_ids(self, store):
        errors = []
        for missing in (User(id=8), User(id=9)):
            with pytest.raises(EntityNotFoundError) as exc_info:
                store.delete(missing)
            errors.append(exc_info.value)

        assert errors[0].error_code == "ENTITY_NOT_FOUND"
        assert errors[0].error_id and errors[1].error_id
        assert errors[0].error_id != errors[1].error_id

    def test_insertion_order_is_preserved(self, store):
        store.create(User(id=5, forename="E"))
        store.create(User(id=2, forename="B"))
        store.create(User(forename="F"))

        assert [u.forename for u in store.get_all()] == ["E", "B", "F"]


class TestUpdateAndDelete:
    def test_update_replaces_by_identity(self, store):
        store.create(User(id=1, forename="Old"))

        store.update(User(id=1, forename="New"))

        assert [u.forename for u in store.get_all()] == ["New"]

    def test_update_keeps_position(self, store):
        store.create(User(id=1, forename="A"))
        store.create(User(id=2, forename="B"))

        store.update(User(id=1, forename="A2"))

        assert [u.id for u in store.get_all()] == [1, 2]

    def test_update_unknown_identity_raises(self, store):
        with pytest.raises(EntityNotFoundError, match="id=7"):
            store.update(User(id=7))

    def test_delete_removes_by_identity(self, store):
        store.create(User(id=1, forename="A"))

        store.delete(User(id=1, forename="different instance"))

        assert store.get_all() == []

    def test_delete_unknown_identity_raises(self, store):
        with pytest.raises(EntityNotFoundError):
            store.delete(User(id=3))

    def test_get_all_returns_new_list(self, store):
        store.create(User(forename="A"))

        listing = store.get_all()
        listing.clear()

        assert store.count() == 1

    def test_clear_keeps_id_counter(self, store):
        store.create(User(forename="A"))
        store.clear()

        assert store.create(User(forename="B")).id == 2


class TestDataStore:
    def test_partitions_are_independent(self):
        data = InMemoryDataStore()

        user = data.users.create(User(forename="A"))
        entry = data.audit_logs.create(AuditLogEntry(user_id=user.id, action="x"))

        assert data.users.get_all() == [user]
        assert data.audit_logs.get_all() == [entry]
        assert entry.log_id == 1

    def test_clear_empties_every_partition(self):
        data = InMemoryDataStore()
        data.users.create(User(forename="A"))
        data.audit_logs.create(AuditLogEntry(user_id=1, action="x"))

        data.clear()

        assert data.users.get_all() == []
        assert data.audit_logs.get_all() == []
