"""Unit tests for the Product model.

Covers:
- Valid creation and server-side defaults (id, active, timestamps).
- Price >= 0 validation (application + DB constraint).
- Stock quantity >= 0.
- Ordering and __str__ representation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from modules.products.models import Product

pytestmark = [pytest.mark.unit, pytest.mark.django_db]


def _make_product(**overrides) -> Product:
    """Build and full_clean a Product, returning the unsaved instance."""
    defaults = {
        "name": "Test Product",
        "price": Decimal("29.90"),
        "stock_quantity": 100,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.full_clean()
    return product


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(
            name="Widget",
            description="A widget",
            price=Decimal("19.99"),
            stock_quantity=5,
        )
        p.refresh_from_db()
        assert p.name == "Widget"
        assert p.price == Decimal("19.99")
        assert p.stock_quantity == 5

    def test_id_assigned_on_first_save(self):
        p = _make_product()
        assert p.id is None
        p.save()
        assert p.id is not None

    def test_active_defaults_to_true(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert p.active is True

    def test_timestamps_set(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert p.created_at is not None
        assert p.updated_at is not None

    def test_update_fields_refreshes_updated_at(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        before = p.updated_at
        p.name = "Renamed"
        p.save(update_fields=["name"])
        p.refresh_from_db()
        assert p.name == "Renamed"
        assert p.updated_at >= before


class TestProductValidation:
    def test_zero_price_is_valid(self):
        _make_product(price=Decimal("0.00"))

    def test_negative_price_fails_clean(self):
        with pytest.raises(ValidationError):
            _make_product(price=Decimal("-1.00"))

    def test_negative_price_rejected_by_db(self):
        with pytest.raises(IntegrityError):
            Product.objects.create(name="Bad", price=Decimal("-1.00"))

    def test_negative_stock_fails_clean(self):
        with pytest.raises(ValidationError):
            _make_product(stock_quantity=-1)


class TestProductDisplay:
    def test_str(self):
        p = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert str(p) == f"#{p.id} - Widget"

    def test_default_ordering_by_name(self):
        Product.objects.create(name="Zeta", price=Decimal("1.00"))
        Product.objects.create(name="Alpha", price=Decimal("1.00"))
        assert [p.name for p in Product.objects.all()] == ["Alpha", "Zeta"]
