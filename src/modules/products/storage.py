"""Product image storage.

``IImageStorage`` is the opaque async blob capability injected into
``ProductService``.  ``FileSystemImageStorage`` backs it with Django's
``FileSystemStorage``; blocking file I/O is moved off the event loop with
``sync_to_async``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import structlog
from asgiref.sync import sync_to_async

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage, Storage

from modules.products.exceptions import ImageNotFound

logger = structlog.get_logger(__name__)


class IImageStorage(ABC):
    """Async blob storage addressed by key."""

    @abstractmethod
    async def store(self, key: str, content: bytes) -> str:
        """Store ``content`` under ``key``, replacing any previous blob."""

    @abstractmethod
    async def fetch(self, key: str) -> bytes:
        """Return the blob stored under ``key``.

        Raises:
            ImageNotFound: if nothing is stored under ``key``.
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the blob under ``key``; missing keys are ignored."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return whether a blob is stored under ``key``."""


class FileSystemImageStorage(IImageStorage):
    """Stores product images as files below ``PRODUCT_IMAGE_ROOT``."""

    def __init__(self, storage: Optional[Storage] = None) -> None:
        self._storage = storage or FileSystemStorage(
            location=settings.PRODUCT_IMAGE_ROOT
        )

    def _store(self, key: str, content: bytes) -> str:
        if self._storage.exists(key):
            self._storage.delete(key)
        return self._storage.save(key, ContentFile(content))

    def _fetch(self, key: str) -> bytes:
        if not self._storage.exists(key):
            raise ImageNotFound(key)
        with self._storage.open(key, "rb") as fh:
            return fh.read()

    async def store(self, key: str, content: bytes) -> str:
        name = await sync_to_async(self._store)(key, content)
        logger.info("product_image.stored", key=name, size=len(content))
        return name

    async def fetch(self, key: str) -> bytes:
        return await sync_to_async(self._fetch)(key)

    def _delete(self, key: str) -> bool:
        if not self._storage.exists(key):
            return False
        self._storage.delete(key)
        return True

    async def delete(self, key: str) -> None:
        if await sync_to_async(self._delete)(key):
            logger.info("product_image.deleted", key=key)

    async def exists(self, key: str) -> bool:
        return await sync_to_async(self._storage.exists)(key)
