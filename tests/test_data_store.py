"""Unit tests for roster.persistence.DataStore."""
from __future__ import annotations

import pytest

from roster.core.entities import Admin, Student, Teacher
from roster.core.enums import RoleType
from roster.core.exceptions import DuplicateEntityError
from roster.persistence import DataStore


def _student(name: str = "Dana Pham") -> Student:
    return Student(name, "0933445566", "dana@student.edu", "Chemistry", "Art", "Music")


class TestAdd:
    def test_ids_start_at_one(self, store: DataStore, teacher: Teacher, admin: Admin) -> None:
        assert store.add(teacher) == 1
        assert store.add(admin) == 2
        assert teacher.id == 1
        assert admin.id == 2
        assert store.next_id == 3

    def test_find_then_render(self, store: DataStore, teacher: Teacher, admin: Admin) -> None:
        store.add(teacher)
        store.add(admin)
        assert store.find_by_id(1).render().startswith("[1] TEACHER")

    def test_adding_a_stored_record_again_is_rejected(self, store: DataStore, teacher: Teacher) -> None:
        store.add(teacher)
        with pytest.raises(DuplicateEntityError):
            store.add(teacher)
        assert len(store) == 1
        assert store.next_id == 2

    def test_ids_never_reused_after_delete(self, store: DataStore, teacher: Teacher, admin: Admin) -> None:
        store.add(teacher)
        store.add(admin)
        assert store.delete(1) is True
        assert store.find_by_id(1) is None
        assert store.add(_student()) == 3

    def test_ids_strictly_increase_across_mixed_operations(self, store: DataStore) -> None:
        ids = []
        for i in range(6):
            ids.append(store.add(_student(f"Student {i}")))
            if i % 2 == 0:
                store.delete(ids[-1])
        ids.append(store.add(_student("Last")))
        assert ids == sorted(set(ids))
        assert ids == list(range(1, 8))


class TestQueries:
    def test_find_missing_returns_none(self, store: DataStore) -> None:
        assert store.find_by_id(42) is None

    def test_get_all_keeps_insertion_order(self, store: DataStore, teacher, admin, student) -> None:
        for person in (student, teacher, admin):
            store.add(person)
        assert [p.name for p in store.get_all()] == ["Charlie Le", "Alice Smith", "Bob Tran"]

    def test_get_all_is_idempotent(self, store: DataStore, teacher, admin) -> None:
        store.add(teacher)
        store.add(admin)
        first = store.get_all()
        second = store.get_all()
        assert [p.id for p in first] == [p.id for p in second] == [1, 2]

    def test_get_all_is_a_read_view(self, store: DataStore, teacher) -> None:
        store.add(teacher)
        view = store.get_all()
        assert isinstance(view, tuple)
        store.delete(1)
        assert len(view) == 1
        assert store.get_all() == ()

    def test_get_by_role(self, store: DataStore, teacher, admin, student) -> None:
        extra = _student()
        for person in (student, teacher, extra, admin):
            store.add(person)
        students = store.get_by_role(RoleType.STUDENT)
        assert [p.id for p in students] == [1, 3]
        assert store.get_by_role("admin") == (admin,)
        assert store.count(RoleType.TEACHER) == 1
        assert store.count() == 4

    def test_iteration_and_membership(self, store: DataStore, teacher, admin) -> None:
        store.add(teacher)
        store.add(admin)
        assert [p.id for p in store] == [1, 2]
        assert 2 in store
        assert 5 not in store


class TestDelete:
    def test_missing_id_is_a_no_op(self, store: DataStore, teacher, admin) -> None:
        store.add(teacher)
        store.add(admin)
        before = store.get_all()
        assert store.delete(99) is False
        assert store.get_all() == before
        assert store.next_id == 3

    def test_preserves_order_of_remaining(self, store: DataStore, teacher, admin, student) -> None:
        for person in (teacher, admin, student):
            store.add(person)
        assert store.delete(2) is True
        assert [p.id for p in store.get_all()] == [1, 3]

    def test_delete_twice(self, store: DataStore, teacher) -> None:
        store.add(teacher)
        assert store.delete(1) is True
        assert store.delete(1) is False
