"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Every method is a coroutine: callers ``await`` the result and never
block on storage I/O.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    async def find_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    async def persist(self, entity: T) -> T:
        """Persist (insert or update) an entity and return it."""

    @abstractmethod
    async def delete(self, entity: T) -> Any:
        """Remove an entity; the returned value is an opaque completion token."""
