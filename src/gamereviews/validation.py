"""
Store integrity validation.

Run at startup (and by ``gamereviews check-seed``) to report seed data that
breaks the collection invariants before any request is served.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from .config import Settings, is_production, settings
from .logging import get_logger
from .store.memory import ReviewStore
from .store.records import Platform

logger = get_logger(__name__)


class StartupValidationError(Exception):
    """Raised when the application refuses to start on invalid data."""

    pass


def _duplicates(values: list[str]) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


def validate_store_integrity(store: ReviewStore) -> dict[str, Any]:
    """
    Check the store against the collection invariants.

    Errors: duplicate ids, duplicate game titles, empty or unknown platforms.
    Warnings: reviews whose author or game does not exist.
    """
    results: dict[str, Any] = {
        "valid": True,
        "warnings": [],
        "errors": [],
        "counts": store.counts(),
    }

    games = store.games.list()
    reviews = store.reviews.list()
    authors = store.authors.list()

    for name, records in (("games", games), ("reviews", reviews), ("authors", authors)):
        duplicate_ids = _duplicates([record.id for record in records])
        if duplicate_ids:
            results["errors"].append(f"Duplicate {name} ids: {', '.join(duplicate_ids)}")

    duplicate_titles = _duplicates([game.title for game in games])
    if duplicate_titles:
        results["errors"].append(f"Duplicate game titles: {', '.join(duplicate_titles)}")

    allowed = set(Platform.values())
    for game in games:
        if not game.platform:
            results["errors"].append(f"Game {game.id} has no platform")
        unknown = [p for p in game.platform if p not in allowed]
        if unknown:
            results["errors"].append(f"Game {game.id} has unknown platforms: {', '.join(unknown)}")

    game_ids = {game.id for game in games}
    author_ids = {author.id for author in authors}
    for review in reviews:
        if review.author_id not in author_ids:
            results["warnings"].append(
                f"Review {review.id} references missing author {review.author_id}"
            )
        if review.game_id not in game_ids:
            results["warnings"].append(
                f"Review {review.id} references missing game {review.game_id}"
            )

    if results["errors"]:
        results["valid"] = False

    return results


def validate_startup_store(store: ReviewStore, current: Settings | None = None) -> dict[str, Any]:
    """
    Validate the store the app is about to serve and log the outcome.

    Raises StartupValidationError when the store is invalid in production.
    """
    current = current or settings
    results = validate_store_integrity(store)

    if results["warnings"]:
        logger.warning("Store integrity warnings", warnings=results["warnings"])

    if not results["valid"]:
        logger.error("Store integrity validation failed", errors=results["errors"])
        if is_production(current):
            raise StartupValidationError("Store integrity validation failed in production")
    else:
        logger.info("Store integrity validation successful", **results["counts"])

    return results
