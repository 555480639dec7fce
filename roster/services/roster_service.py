"""
Roster service: the operations offered to the console and REST layers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..core.entities import FieldUpdate, Person, create_person
from ..core.enums import AuditAction, RoleType
from ..core.exceptions import ResourceNotFoundError, ValidationError
from ..persistence.repositories import DataStore

logger = logging.getLogger(__name__)


SAMPLE_RECORDS: List[Tuple[RoleType, Dict[str, Any]]] = [
    (RoleType.TEACHER, {
        "name": "Alice Smith", "telephone": "0901234567", "email": "alice@school.edu",
        "salary": 1500, "subject1": "Math", "subject2": "Physics",
    }),
    (RoleType.ADMIN, {
        "name": "Bob Tran", "telephone": "0912345678", "email": "bob@school.edu",
        "salary": 1200, "is_full_time": True, "working_hours": 40,
    }),
    (RoleType.STUDENT, {
        "name": "Charlie Le", "telephone": "0987654321", "email": "charlie@student.edu",
        "subject1": "English", "subject2": "History", "subject3": "Biology",
    }),
]


@dataclass
class RecordResult:
    """Result of a create operation."""
    success: bool
    message: str
    person: Optional[Person] = None
    error: Optional[ValidationError] = None

    @property
    def id(self) -> Optional[int]:
        return self.person.id if self.person is not None else None


@dataclass
class ServiceStatistics:
    created: int = 0
    rejected: int = 0
    updated: int = 0
    deleted: int = 0
    by_action: Dict[str, int] = field(default_factory=dict)

    def record(self, action: AuditAction) -> None:
        self.by_action[action.value] = self.by_action.get(action.value, 0) + 1


class RosterService:
    """Create, read, update and delete person records held in a ``DataStore``."""

    def __init__(self, store: Optional[DataStore] = None):
        self._store = store if store is not None else DataStore()
        self._stats = ServiceStatistics()

    @property
    def store(self) -> DataStore:
        return self._store

    def create(self, role, **fields) -> RecordResult:
        """Build a record of ``role`` from raw fields and add it.

        Invalid input yields a failed result and leaves the store untouched.
        """
        role = RoleType.parse(role)
        try:
            person = create_person(role, **fields)
        except ValidationError as e:
            self._stats.rejected += 1
            logger.warning("Rejected new %s: %s (%s)", role.name, e.message, e.field)
            return RecordResult(success=False, message=e.message, error=e)

        self.add(person)
        return RecordResult(success=True, message="Record added successfully.", person=person)

    def add(self, person: Person) -> int:
        entity_id = self._store.add(person)
        self._stats.created += 1
        self._stats.record(AuditAction.CREATE)
        logger.info("Added %s record %d", person.role.name, entity_id)
        return entity_id

    def find(self, entity_id: int) -> Optional[Person]:
        return self._store.find_by_id(entity_id)

    def get(self, entity_id: int) -> Person:
        """Like ``find`` but raises ``ResourceNotFoundError`` when absent."""
        person = self._store.find_by_id(entity_id)
        if person is None:
            raise ResourceNotFoundError(f"Record {entity_id} not found", error_code="not_found",
                                        details={"id": entity_id})
        return person

    def list_all(self) -> Tuple[Person, ...]:
        return self._store.get_all()

    def list_by_role(self, role) -> Tuple[Person, ...]:
        return self._store.get_by_role(role)

    def set_field(self, person: Union[Person, int], field_name: str, value: Any) -> FieldUpdate:
        """Change one field of a record (given as instance or id)."""
        if not isinstance(person, Person):
            person = self.get(person)
        result = person.set_field(field_name, value)
        self._log_update(person, result)
        return result

    def update(self, entity_id: int, changes: Mapping[str, Any]) -> List[FieldUpdate]:
        """Apply several raw changes; blank values keep the current value."""
        person = self.get(entity_id)
        results = person.update_fields(changes)
        for result in results:
            self._log_update(person, result)
        return results

    def delete(self, entity_id: int) -> bool:
        removed = self._store.delete(entity_id)
        if removed:
            self._stats.deleted += 1
            self._stats.record(AuditAction.DELETE)
            logger.info("Deleted record %d", entity_id)
        else:
            logger.info("Delete of missing record %d ignored", entity_id)
        return removed

    def seed_sample_data(self) -> List[int]:
        """Add the built-in sample records and return their ids."""
        ids = []
        for role, fields in SAMPLE_RECORDS:
            ids.append(self.add(create_person(role, **fields)))
        return ids

    def statistics(self) -> Dict[str, Any]:
        return {
            "total": self._store.count(),
            "by_role": {role.name.lower(): self._store.count(role) for role in RoleType},
            "next_id": self._store.next_id,
            "created": self._stats.created,
            "rejected": self._stats.rejected,
            "updated": self._stats.updated,
            "deleted": self._stats.deleted,
            "actions": dict(self._stats.by_action),
        }

    def _log_update(self, person: Person, result: FieldUpdate) -> None:
        if result.success:
            self._stats.updated += 1
            self._stats.record(AuditAction.UPDATE)
            logger.info("Updated %s of record %s", result.field, person.id)
        else:
            logger.warning("Rejected %s for record %s: %s", result.field, person.id, result.message)
