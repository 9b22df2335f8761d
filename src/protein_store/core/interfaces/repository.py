"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..domain.models.result import Result

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository interface for persisting entities to a path.

    Implementations report failures through Result instead of raising.
    """

    @abstractmethod
    def save(self, entity: T, path: str) -> Result[str]:
        """Persist an entity, returning the path written."""
        pass

    @abstractmethod
    def load(self, path: str) -> Result[T]:
        """Load a new entity from a path."""
        pass
