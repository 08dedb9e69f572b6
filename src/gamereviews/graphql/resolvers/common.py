"""
Helpers shared by the store-backed resolvers
"""

import dataclasses
from typing import Any, TypeVar

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ...store.memory import Collection
from ...store.records import Record

logger = get_logger(__name__)

R = TypeVar("R", bound=Record)


def require_record(collection: Collection[R], id: str, entity: str) -> R:
    """Return the record with ``id`` or raise NotFoundError."""
    record = collection.get(id)
    if record is None:
        logger.info("Record not found", entity=entity, id=id)
        raise NotFoundError(entity, id)
    return record


def provided_fields(edits: Any) -> dict[str, Any]:
    """Collect the fields of an edit input that were actually given.

    Omitted and null fields are skipped, so a shallow merge keeps the existing
    values for them.
    """
    values: dict[str, Any] = {}
    for field in dataclasses.fields(edits):
        value = getattr(edits, field.name)
        if value is strawberry.UNSET or value is None:
            continue
        values[field.name] = value
    return values
