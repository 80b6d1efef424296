"""Mapping between ``ProductDTO`` and the ``Product`` model.

``Product -> ProductDTO`` is lossy: ``id``, ``active`` and timestamps are
dropped.  ``ProductDTO -> Product`` fills those from service policy,
never from client input.
"""

from __future__ import annotations

from modules.products.dtos import ProductDTO
from modules.products.models import Product

CLIENT_FIELDS = ("name", "description", "price", "stock_quantity")


def to_dto(product: Product) -> ProductDTO:
    """Project the client-settable fields; ``id``, ``active`` and timestamps are dropped."""
    return ProductDTO(**{field: getattr(product, field) for field in CLIENT_FIELDS})


def to_entity(dto: ProductDTO) -> Product:
    """Build a new, unsaved product: no ``id`` yet and ``active=True``."""
    return Product(
        id=None,
        active=True,
        **{field: getattr(dto, field) for field in CLIENT_FIELDS},
    )


def apply(dto: ProductDTO, product: Product) -> Product:
    """Overwrite the client-settable fields of ``product`` in place.

    ``id`` and ``active`` are left untouched.
    """
    for field in CLIENT_FIELDS:
        setattr(product, field, getattr(dto, field))
    return product
