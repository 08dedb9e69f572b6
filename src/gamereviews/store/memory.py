"""
In-memory store for games, reviews and authors.

A ``ReviewStore`` is constructed explicitly and owned by whoever builds it
(the FastAPI app, a test). Nothing in this module keeps module-level state.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from .ids import IdGenerator, UUIDIdGenerator
from .records import AuthorRecord, GameRecord, Record, ReviewRecord

R = TypeVar("R", bound=Record)


class Collection(Generic[R]):
    """Ordered list of records with id lookups.

    Reads return new lists so callers never observe a later write. Writes take
    the collection lock; ``locked()`` lets a caller hold it across a
    read-validate-write sequence.
    """

    def __init__(self, name: str, records: Iterable[R] = ()) -> None:
        self.name = name
        self._records: list[R] = list(records)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.list())

    @contextmanager
    def locked(self) -> Iterator[Collection[R]]:
        with self._lock:
            yield self

    def list(self) -> list[R]:
        return list(self._records)

    def ids(self) -> set[str]:
        return {record.id for record in self._records}

    def get(self, id: str) -> R | None:
        return self.find(lambda record: record.id == id)

    def exists(self, id: str) -> bool:
        return self.get(id) is not None

    def find(self, predicate: Callable[[R], bool]) -> R | None:
        return next((record for record in self._records if predicate(record)), None)

    def filter(self, predicate: Callable[[R], bool]) -> list[R]:
        return [record for record in self._records if predicate(record)]

    def insert(self, record: R) -> R:
        with self._lock:
            self._records.append(record)
        return record

    def replace(self, record: R) -> R | None:
        """Swap the record sharing ``record.id`` in place; None if there is none."""
        with self._lock:
            for index, current in enumerate(self._records):
                if current.id == record.id:
                    self._records[index] = record
                    return record
        return None

    def replace_all(self, records: Iterable[R]) -> None:
        with self._lock:
            self._records = list(records)

    def remove_where(self, predicate: Callable[[R], bool]) -> int:
        """Remove every matching record, keeping the order of the rest."""
        with self._lock:
            kept = [record for record in self._records if not predicate(record)]
            removed = len(self._records) - len(kept)
            self._records = kept
        return removed


class ReviewStore:
    """The three collections plus the id generator used for new records."""

    def __init__(
        self,
        games: Iterable[GameRecord] = (),
        reviews: Iterable[ReviewRecord] = (),
        authors: Iterable[AuthorRecord] = (),
        id_generator: IdGenerator | None = None,
    ) -> None:
        self.games: Collection[GameRecord] = Collection("games", games)
        self.reviews: Collection[ReviewRecord] = Collection("reviews", reviews)
        self.authors: Collection[AuthorRecord] = Collection("authors", authors)
        self.id_generator = id_generator or UUIDIdGenerator()

    @classmethod
    def from_seed(
        cls, data: Mapping[str, Iterable[Mapping[str, Any]]], id_generator: IdGenerator | None = None
    ) -> ReviewStore:
        """Build a store from ``{"games": [...], "reviews": [...], "authors": [...]}``."""
        return cls(
            games=[GameRecord.model_validate(item) for item in data.get("games", ())],
            reviews=[ReviewRecord.model_validate(item) for item in data.get("reviews", ())],
            authors=[AuthorRecord.model_validate(item) for item in data.get("authors", ())],
            id_generator=id_generator,
        )

    def new_id(self, collection: Collection[Any]) -> str:
        """Generate an id unused in ``collection``."""
        return self.id_generator(collection.ids())

    def counts(self) -> dict[str, int]:
        return {
            "games": len(self.games),
            "reviews": len(self.reviews),
            "authors": len(self.authors),
        }

    def snapshot(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "games": [record.model_dump() for record in self.games.list()],
            "reviews": [record.model_dump() for record in self.reviews.list()],
            "authors": [record.model_dump() for record in self.authors.list()],
        }
