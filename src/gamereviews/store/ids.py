"""
Record id generators.

Every generator is called with the ids already used in the target collection
and returns one that is not among them.
"""

import random
import uuid
from collections.abc import Collection
from typing import Protocol


class IdGenerator(Protocol):
    def __call__(self, existing: Collection[str]) -> str: ...


class UUIDIdGenerator:
    """Random UUID4 ids."""

    def __call__(self, existing: Collection[str]) -> str:
        new_id = str(uuid.uuid4())
        while new_id in existing:
            new_id = str(uuid.uuid4())
        return new_id


class CounterIdGenerator:
    """Monotonic decimal ids, skipping values already present."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def __call__(self, existing: Collection[str]) -> str:
        while str(self._next) in existing:
            self._next += 1
        new_id = str(self._next)
        self._next += 1
        return new_id


class RandomIdGenerator:
    """Decimal ids drawn uniformly from ``[0, upper)``.

    Compatible with ids issued by earlier deployments. Collisions are redrawn,
    so the id space fills up after ``upper`` records.
    """

    def __init__(self, upper: int = 10000, rng: random.Random | None = None) -> None:
        self.upper = upper
        self._rng = rng or random.Random()

    def __call__(self, existing: Collection[str]) -> str:
        taken = sum(1 for i in existing if self._in_range(i))
        if taken >= self.upper:
            raise RuntimeError(f"Id space exhausted: all {self.upper} random ids are in use")

        while True:
            new_id = str(self._rng.randrange(self.upper))
            if new_id not in existing:
                return new_id

    def _in_range(self, value: str) -> bool:
        return value.isdecimal() and str(int(value)) == value and int(value) < self.upper


ID_STRATEGIES: dict[str, type] = {
    "uuid": UUIDIdGenerator,
    "counter": CounterIdGenerator,
    "random": RandomIdGenerator,
}


def create_id_generator(strategy: str) -> IdGenerator:
    """Build the id generator registered under ``strategy``."""
    try:
        factory = ID_STRATEGIES[strategy.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown id strategy '{strategy}'. Choose one of: {', '.join(ID_STRATEGIES)}"
        ) from None
    return factory()
