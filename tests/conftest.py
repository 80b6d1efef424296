from decimal import Decimal

import pytest

from modules.products.dtos import ProductDTO
from modules.products.models import Product


@pytest.fixture()
def product_dto():
    """DTO matching the reference catalog product."""
    return ProductDTO(
        name="Test Product",
        description="Test Description",
        price=Decimal("99.99"),
        stock_quantity=10,
    )


@pytest.fixture()
def test_product():
    """Unsaved Product with id=1, as a repository would return it."""
    return Product(
        id=1,
        name="Test Product",
        description="Test Description",
        price=Decimal("99.99"),
        stock_quantity=10,
        active=True,
    )
