"""Product service layer (Use Cases).

Orchestrates the Product lifecycle, delegating persistence to the
injected ``IProductRepository``.  Every operation is a coroutine; the
only suspension points are the awaits on collaborators.

Business rules enforced here:
- Identifier and ``active`` are server-controlled: new products start
  active and updates never touch either.
- Update and delete run only after the existence check succeeded.
- ``ProductNotFound`` is the only error introduced here; repository
  failures propagate unchanged.

Two concurrent updates of the same product are not serialised: both
read, both write, the last persist wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from modules.products import mappers
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.storage import FileSystemImageStorage, IImageStorage

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository


class ProductService:
    """Application service for Product use-cases.

    Receives its collaborators via constructor injection (DIP).
    ``image_storage`` is held for image features; the CRUD paths below
    do not use it.
    """

    def __init__(
        self,
        repository: IProductRepository,
        image_storage: IImageStorage,
    ) -> None:
        self._repo = repository
        self._images = image_storage

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_product_by_id(self, id: Any) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = await self._repo.find_by_id(id)
        if product is None:
            raise ProductNotFound(id)
        return product

    async def find_active_products(self) -> List[Product]:
        """Return the repository's active products as-is (possibly empty)."""
        return await self._repo.find_active_products()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_product(self, dto: ProductDTO) -> Product:
        """Create a new, active product; the store assigns its ``id``."""
        return await self._repo.persist(mappers.to_entity(dto))

    async def update_product(self, id: Any, dto: ProductDTO) -> Product:
        """Overwrite name, description, price and stock of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = await self.get_product_by_id(id)
        return await self._repo.persist(mappers.apply(dto, product))

    async def delete_product(self, id: Any) -> bool:
        """Delete an existing product.

        Any non-failing completion of the repository delete counts as
        success; its return value is not inspected.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = await self.get_product_by_id(id)
        await self._repo.delete(product)
        return True


def default_product_service() -> ProductService:
    """Wire a ``ProductService`` with the Django-backed collaborators."""
    return ProductService(
        repository=ProductDjangoRepository(),
        image_storage=FileSystemImageStorage(),
    )
