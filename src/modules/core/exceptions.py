"""Exceptions shared across catalog modules.

Module-specific exceptions (``modules.<name>.exceptions``) extend these
so the API layer can map a whole family to one HTTP status.
"""

from __future__ import annotations

from typing import Any


class ResourceNotFound(Exception):
    """An identifier does not resolve to a persisted entity.

    Carries the entity kind (``resource``) and the ``identifier`` that was
    looked up, so callers can render a precise not-found response.
    """

    def __init__(self, resource: str, identifier: Any) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found.")
