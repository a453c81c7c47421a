"""Catalog error types.

The store raises these instead of returning ``None`` for missing data; the
HTTP layer maps them onto status codes in ``tastematch.main``.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for catalog and matching errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """A referenced user, track, artist or playlist does not exist."""

    status_code = 404

    def __init__(self, entity: str, identifier: Any) -> None:
        super().__init__(f"{entity} {identifier!r} not found")
        self.entity = entity
        self.identifier = identifier


class InvalidInputError(CatalogError):
    """Malformed input, e.g. an out-of-range preference value or empty query."""

    status_code = 400


class PermissionDeniedError(CatalogError):
    """The caller does not own the resource it is trying to modify."""

    status_code = 403
