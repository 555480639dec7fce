"""
Core interfaces and abstract base classes for the roster.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar


T = TypeVar('T')


class Renderable(ABC):
    """Interface for records that produce a one-line display string."""
    
    @abstractmethod
    def render(self) -> str:
        """Return the human-readable line for this record."""
        pass


class Repository(ABC, Generic[T]):
    """Abstract record store keyed by integer ids."""
    
    @abstractmethod
    def add(self, entity: T) -> int:
        """Store an entity and return the id assigned to it."""
        pass
    
    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Find an entity by id, ``None`` when absent."""
        pass
    
    @abstractmethod
    def get_all(self) -> Sequence[T]:
        """All entities in insertion order."""
        pass
    
    @abstractmethod
    def delete(self, entity_id: int) -> bool:
        """Delete an entity by id and report whether one was removed."""
        pass
