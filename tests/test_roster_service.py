"""Tests for roster.services.RosterService."""
from __future__ import annotations

import logging

import pytest

from roster.core.entities import Admin, Student, Teacher
from roster.core.enums import RoleType, ValidationErrorKind
from roster.core.exceptions import ResourceNotFoundError
from roster.services import RosterService


def test_seed_sample_data(service: RosterService) -> None:
    assert service.seed_sample_data() == [1, 2, 3]
    assert [type(p) for p in service.list_all()] == [Teacher, Admin, Student]
    assert service.find(1).render().startswith("[1] TEACHER")


class TestCreate:
    def test_valid_record_is_added(self, service: RosterService) -> None:
        result = service.create("student", name="Dana Pham", telephone="0933445566",
                                email="dana@student.edu", subject1="Art")
        assert result.success
        assert result.id == 1
        assert service.find(1) is result.person

    def test_invalid_record_is_not_added(self, service: RosterService, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="roster.services.roster_service"):
            result = service.create(RoleType.TEACHER, name="Eve", telephone="12345",
                                    email="eve@school.edu", salary=100)
        assert not result.success
        assert result.id is None
        assert result.error.kind is ValidationErrorKind.INVALID_FORMAT
        assert result.error.field == "telephone"
        assert service.list_all() == ()
        assert service.store.next_id == 1
        assert "Rejected new TEACHER" in caplog.text


class TestScenarios:
    def test_delete_then_add_gets_fresh_id(self, seeded_service: RosterService) -> None:
        assert seeded_service.delete(1) is True
        assert seeded_service.find(1) is None
        result = seeded_service.create(RoleType.STUDENT, name="Dana Pham", telephone="0933445566",
                                       email="dana@student.edu")
        assert result.id == 4

    def test_delete_missing(self, seeded_service: RosterService) -> None:
        assert seeded_service.delete(99) is False
        assert [p.id for p in seeded_service.list_all()] == [1, 2, 3]

    def test_rejected_working_hours_keeps_previous(self, seeded_service: RosterService) -> None:
        result = seeded_service.set_field(2, "working_hours", 90)
        assert not result.success
        assert result.error.kind is ValidationErrorKind.OUT_OF_RANGE
        assert seeded_service.get(2).working_hours == 40


class TestQueries:
    def test_get_missing_raises(self, service: RosterService) -> None:
        with pytest.raises(ResourceNotFoundError):
            service.get(1)

    def test_find_missing_returns_none(self, service: RosterService) -> None:
        assert service.find(1) is None

    def test_list_by_role(self, seeded_service: RosterService) -> None:
        admins = seeded_service.list_by_role(RoleType.ADMIN)
        assert [p.name for p in admins] == ["Bob Tran"]
        assert seeded_service.list_by_role(3)[0].name == "Charlie Le"


class TestUpdate:
    def test_set_field_with_instance(self, seeded_service: RosterService) -> None:
        teacher = seeded_service.get(1)
        result = seeded_service.set_field(teacher, "subject2", "Chemistry")
        assert result.success
        assert teacher.subject2 == "Chemistry"

    def test_set_field_missing_record(self, service: RosterService) -> None:
        with pytest.raises(ResourceNotFoundError):
            service.set_field(7, "name", "Nobody")

    def test_update_skips_blank_values(self, seeded_service: RosterService) -> None:
        results = seeded_service.update(3, {"name": "", "telephone": "  ", "subject3": "Physics"})
        assert [r.field for r in results] == ["subject3"]
        student = seeded_service.get(3)
        assert student.name == "Charlie Le"
        assert student.telephone == "0987654321"
        assert student.subject3 == "Physics"


def test_statistics(seeded_service: RosterService) -> None:
    seeded_service.delete(1)
    seeded_service.set_field(2, "working_hours", 30)
    seeded_service.set_field(2, "working_hours", 300)
    seeded_service.create(RoleType.ADMIN, name="")

    stats = seeded_service.statistics()
    assert stats["total"] == 2
    assert stats["by_role"] == {"teacher": 0, "admin": 1, "student": 1}
    assert stats["next_id"] == 4
    assert stats["created"] == 3
    assert stats["rejected"] == 1
    assert stats["updated"] == 1
    assert stats["deleted"] == 1
    assert stats["actions"] == {"create": 3, "delete": 1, "update": 1}
