"""Generic repository interface.

``IRepository[T, K]`` is the base abstract class every domain repository
extends.  ``T`` is the entity, ``K`` the business key it is addressed by.
Service code depends on this abstraction, never on the ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class IRepository(ABC, Generic[T, K]):
    """Base generic repository contract."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities, optionally restricted by exact-match filters."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, key: K) -> bool:
        """Remove the entity addressed by ``key``.

        Returns ``True`` if a row was removed.
        """
