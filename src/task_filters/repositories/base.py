"""Base repository interface for data access layer."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class Repository(ABC):
    """Abstract base class for repository pattern."""

    @abstractmethod
    def insert(self, entity: Any) -> Any:
        """Insert a new entity and return its identifier."""
        pass

    @abstractmethod
    def update(self, entity: Any) -> None:
        """Overwrite the stored entity with the same identifier."""
        pass

    @abstractmethod
    def delete(self, id: Any) -> None:
        """Delete entity by identifier."""
        pass

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[Any]:
        """Find entity by its identifier."""
        pass

    @abstractmethod
    def get_all(self) -> List[Any]:
        """Retrieve all entities."""
        pass

    @abstractmethod
    def exists(self, id: Any) -> bool:
        """Check if entity exists."""
        pass
