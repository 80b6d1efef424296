from __future__ import annotations

import random
from decimal import Decimal

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from modules.products.dtos import ProductDTO
from modules.products.models import Product
from modules.products.services import ProductService, default_product_service

CATALOG = [
    ("Monitor 27\"", "Electronics", Decimal("1299.90")),
    ("Mechanical Keyboard", "Electronics", Decimal("399.90")),
    ("Gaming Mouse", "Electronics", Decimal("249.90")),
    ("Notebook 14\"", "Electronics", Decimal("3999.00")),
    ("Headset", "Electronics", Decimal("299.90")),
    ("Office Desk", "Furniture", Decimal("899.00")),
    ("Ergonomic Chair", "Furniture", Decimal("1499.00")),
    ("Bookshelf", "Furniture", Decimal("699.00")),
    ("A4 Paper", "Office", Decimal("29.90")),
    ("Blue Pen", "Office", Decimal("4.90")),
    ("Notebook", "Office", Decimal("19.90")),
    ("Stapler", "Office", Decimal("39.90")),
]


class Command(BaseCommand):
    help = "Seed the catalog with development products."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding products...")

        created, skipped = async_to_sync(self._seed_products)(
            default_product_service()
        )

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products_created={created}, skipped={skipped}"
            )
        )

    async def _seed_products(self, service: ProductService) -> tuple[int, int]:
        existing = {
            name async for name in Product.objects.values_list("name", flat=True)
        }
        created = skipped = 0
        for name, category, price in CATALOG:
            if name in existing:
                skipped += 1
                continue
            await service.create_product(
                ProductDTO(
                    name=name,
                    description=category,
                    price=price,
                    stock_quantity=random.randint(10, 200),
                )
            )
            created += 1
        return created, skipped
