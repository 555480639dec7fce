"""Shared test fixtures for the roster.

Fixtures defined here are available to all tests in the suite without
needing an explicit import.
"""
from __future__ import annotations

import pytest

from roster.core.entities import Admin, Student, Teacher
from roster.persistence import DataStore
from roster.services import RosterService


@pytest.fixture()
def teacher() -> Teacher:
    return Teacher("Alice Smith", "0901234567", "alice@school.edu", 1500, "Math", "Physics")


@pytest.fixture()
def admin() -> Admin:
    return Admin("Bob Tran", "0912345678", "bob@school.edu", 1200, True, 40)


@pytest.fixture()
def student() -> Student:
    return Student("Charlie Le", "0987654321", "charlie@student.edu", "English", "History", "Biology")


@pytest.fixture()
def store() -> DataStore:
    return DataStore()


@pytest.fixture()
def service(store: DataStore) -> RosterService:
    return RosterService(store)


@pytest.fixture()
def seeded_service(service: RosterService) -> RosterService:
    """Service holding the three sample records with ids 1, 2 and 3."""
    service.seed_sample_data()
    return service
