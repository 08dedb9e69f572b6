"""
Seed data for the in-memory store.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..errors import SeedDataError
from ..logging import get_logger
from .ids import IdGenerator
from .memory import ReviewStore

logger = get_logger(__name__)

DEFAULT_SEED: dict[str, list[dict[str, Any]]] = {
    "games": [
        {"id": "1", "title": "Zelda, Tears of the Kingdom", "platform": ["Switch"]},
        {"id": "2", "title": "Final Fantasy 7 Remake", "platform": ["PS5", "Xbox"]},
        {"id": "3", "title": "Elden Ring", "platform": ["PS5", "Xbox", "PC"]},
        {"id": "4", "title": "Mario Kart", "platform": ["Switch"]},
        {"id": "5", "title": "Pokemon Scarlet", "platform": ["PS5", "Xbox", "PC"]},
    ],
    "authors": [
        {"id": "1", "name": "mario", "verified": True},
        {"id": "2", "name": "yoshi", "verified": False},
        {"id": "3", "name": "peach", "verified": True},
    ],
    "reviews": [
        {"id": "1", "rating": 9, "content": "Huge world, still surprising", "author_id": "1", "game_id": "2"},  # noqa: E501
        {"id": "2", "rating": 10, "content": "Best open world in years", "author_id": "2", "game_id": "1"},  # noqa: E501
        {"id": "3", "rating": 7, "content": "Great fun with friends", "author_id": "3", "game_id": "3"},  # noqa: E501
        {"id": "4", "rating": 5, "content": "Too many fetch quests", "author_id": "2", "game_id": "4"},  # noqa: E501
        {"id": "5", "rating": 8, "content": "Combat finally clicks", "author_id": "2", "game_id": "5"},  # noqa: E501
        {"id": "6", "rating": 7, "content": "Runs rough on launch", "author_id": "1", "game_id": "2"},  # noqa: E501
        {"id": "7", "rating": 10, "content": "A genuine classic", "author_id": "3", "game_id": "1"},  # noqa: E501
    ],
}

SEED_KEYS = ("games", "reviews", "authors")


def load_seed_file(path: str | Path) -> dict[str, list[dict[str, Any]]]:
    """Read a JSON seed file into the ``{"games", "reviews", "authors"}`` shape.

    Missing collections default to empty lists.

    Raises:
        SeedDataError: If the file is unreadable, not JSON, or has the wrong shape
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedDataError(f"Cannot read seed file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise SeedDataError(f"Seed file {path} must contain a JSON object")

    unknown = set(raw) - set(SEED_KEYS)
    if unknown:
        raise SeedDataError(f"Seed file {path} has unknown keys: {', '.join(sorted(unknown))}")

    data: dict[str, list[dict[str, Any]]] = {}
    for key in SEED_KEYS:
        items = raw.get(key, [])
        if not isinstance(items, list):
            raise SeedDataError(f"Seed file {path}: '{key}' must be a list")
        data[key] = items
    return data


def build_store(
    seed_path: str | Path | None = None,
    use_defaults: bool = True,
    id_generator: IdGenerator | None = None,
) -> ReviewStore:
    """Create a store from a seed file, the built-in dataset, or nothing."""
    if seed_path:
        data = load_seed_file(seed_path)
        source = str(seed_path)
    elif use_defaults:
        data = DEFAULT_SEED
        source = "defaults"
    else:
        data = {}
        source = "empty"

    try:
        store = ReviewStore.from_seed(data, id_generator=id_generator)
    except PydanticValidationError as e:
        raise SeedDataError(f"Invalid seed records from {source}: {e}") from e

    logger.info("Store seeded", source=source, **store.counts())
    return store
