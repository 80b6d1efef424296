"""Product domain exceptions.

Raised by the Service Layer and the storage adapters.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import ResourceNotFound

PRODUCT_RESOURCE = "Product"


class ProductNotFound(ResourceNotFound):
    """The requested product identifier does not resolve to a stored product."""

    def __init__(self, identifier: Any) -> None:
        super().__init__(PRODUCT_RESOURCE, identifier)


class ImageNotFound(Exception):
    """No blob is stored under the requested image key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Image '{key}' not found.")
