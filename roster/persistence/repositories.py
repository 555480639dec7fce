"""
In-memory record store for person records.
"""

import logging
import threading
from typing import Iterator, List, Optional, Tuple

from ..core.entities import Person
from ..core.enums import RoleType
from ..core.interfaces import Repository

logger = logging.getLogger(__name__)


class DataStore(Repository[Person]):
    """Owns the roster and hands out ids.

    Records are kept in insertion order. Ids come from a counter that starts
    at 1 and only ever grows, so an id is never handed out twice, not even
    after the record holding it was deleted.
    """
    
    def __init__(self):
        self._people: List[Person] = []
        self._next_id = 1
        self._lock = threading.RLock()
    
    @property
    def next_id(self) -> int:
        return self._next_id
    
    def add(self, person: Person) -> int:
        """Assign the next id to ``person`` and append it."""
        with self._lock:
            person._assign_id(self._next_id)
            self._next_id += 1
            self._people.append(person)
            logger.debug("Stored %s with id %d", person.role.name, person.id)
            return person.id
    
    def find_by_id(self, entity_id: int) -> Optional[Person]:
        with self._lock:
            for person in self._people:
                if person.id == entity_id:
                    return person
            return None
    
    def get_all(self) -> Tuple[Person, ...]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return tuple(self._people)
    
    def get_by_role(self, role) -> Tuple[Person, ...]:
        role = RoleType.parse(role)
        with self._lock:
            return tuple(p for p in self._people if p.role == role)
    
    def delete(self, entity_id: int) -> bool:
        with self._lock:
            person = self.find_by_id(entity_id)
            if person is None:
                return False
            self._people.remove(person)
            logger.debug("Removed %s with id %d", person.role.name, entity_id)
            return True
    
    def count(self, role=None) -> int:
        """Count records, optionally only those of one role."""
        if role is None:
            with self._lock:
                return len(self._people)
        return len(self.get_by_role(role))
    
    def __len__(self) -> int:
        return self.count()
    
    def __iter__(self) -> Iterator[Person]:
        return iter(self.get_all())
    
    def __contains__(self, entity_id) -> bool:
        return self.find_by_id(entity_id) is not None
