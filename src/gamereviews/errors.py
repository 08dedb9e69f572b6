"""
Error taxonomy for catalog operations.

Each error carries an ``extensions`` mapping. graphql-core copies the
``extensions`` of the original exception onto the located GraphQL error, so
clients can tell a missing record from rejected input by ``extensions.code``.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for errors raised by store-backed resolvers."""

    code = "CATALOG_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.extensions: dict[str, Any] = {"code": self.code}


class NotFoundError(CatalogError):
    """Raised when a lookup by id finds no record."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, id: str) -> None:
        super().__init__(f"{entity} with id {id} not found")
        self.entity = entity
        self.id = id
        self.extensions.update(entity=entity, id=id)


class ValidationError(CatalogError):
    """Raised when mutation input breaks a collection invariant."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        if field:
            self.extensions["field"] = field


class SeedDataError(Exception):
    """Raised when seed data cannot be loaded."""

    pass
