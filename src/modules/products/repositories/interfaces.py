"""Product repository interface.

Extends ``IRepository[Product]`` with the catalog listing query.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    async def find_active_products(self) -> List[Product]:
        """Return the active products, in the store's catalog ordering."""
