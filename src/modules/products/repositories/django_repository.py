"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's async QuerySet API
(``afirst``/``asave``/``adelete``, ``async for``).
Error handling follows the Null Object pattern: ``find_by_id`` returns
``None`` instead of raising; the Service Layer decides how to translate
a missing entity into a domain error.  Database errors propagate.
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog

from django.core.exceptions import ValidationError

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    async def find_by_id(self, id: Any) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return await Product.objects.filter(id=id).afirst()
        except (ValueError, TypeError, ValidationError):
            return None

    async def persist(self, entity: Product) -> Product:
        """Insert (no ``id`` yet) or update a product."""
        await entity.asave()
        logger.info("product.saved", product_id=entity.id, name=entity.name)
        return entity

    async def delete(self, entity: Product) -> tuple[int, dict[str, int]]:
        """Hard-delete a product.

        Returns Django's ``(count, {label: count})`` tuple.
        """
        product_id = entity.id
        result = await entity.adelete()
        logger.info("product.deleted", product_id=product_id)
        return result

    async def find_active_products(self) -> List[Product]:
        return [product async for product in Product.objects.filter(active=True)]
