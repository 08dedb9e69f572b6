from typing import TYPE_CHECKING

import strawberry

from ...errors import ValidationError
from ...logging import get_logger
from ...store.records import GameRecord, Platform
from ..context import get_store_from_info
from .common import provided_fields, require_record

if TYPE_CHECKING:
    from ..mutations.root import AddGameInput, EditGameInput
    from ..types.game import Game
    from ..types.review import Review

logger = get_logger(__name__)

PLATFORM_CHOICES = "Switch, PS5, Xbox, or PC"


def validate_platforms(platform: list[str]) -> list[str]:
    """
    Check a platform list against the Platform enum.

    Returns the list with duplicates dropped, first occurrence order kept.
    """
    if not platform:
        raise ValidationError(f"Platform must include one of {PLATFORM_CHOICES}", field="platform")

    allowed = Platform.values()
    if any(p not in allowed for p in platform):
        raise ValidationError(f"Platform must be one of {PLATFORM_CHOICES}", field="platform")

    return list(dict.fromkeys(platform))


# Query resolvers
async def resolve_games(info: strawberry.Info) -> list["Game"]:
    """Resolve every game in store order."""
    from ..types.game import Game as GameType

    store = get_store_from_info(info)
    return [GameType.from_record(record) for record in store.games.list()]


async def resolve_game_by_id(info: strawberry.Info, id: str) -> "Game":
    """Resolve a game by ID; raises NotFoundError when absent."""
    from ..types.game import Game as GameType

    store = get_store_from_info(info)
    return GameType.from_record(require_record(store.games, id, "Game"))


# Field resolvers
async def resolve_game_reviews(game: "Game", info: strawberry.Info) -> list["Review"]:
    """Resolve the reviews whose game_id points at this game."""
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    return [
        ReviewType.from_record(record)
        for record in store.reviews.filter(lambda r: r.game_id == game.id)
    ]


# Mutation resolvers
async def add_game(info: strawberry.Info, game: "AddGameInput") -> "Game":
    """
    Add a new game.

    The title must not match an existing game exactly and every platform
    must be a known Platform value.
    """
    from ..types.game import Game as GameType

    store = get_store_from_info(info)

    with store.games.locked() as games:
        if games.find(lambda g: g.title == game.title):
            raise ValidationError("Game title must be unique", field="title")

        platform = validate_platforms(list(game.platform))
        record = GameRecord(id=store.new_id(games), title=game.title, platform=platform)
        games.insert(record)

    logger.info("Game added", game_id=record.id, title=record.title, platform=record.platform)
    return GameType.from_record(record)


async def delete_game(info: strawberry.Info, id: str) -> list["Game"]:
    """
    Delete a game and return the games that remain.

    Reviews of the deleted game are kept; their ``game`` field resolves to
    null from then on.
    """
    from ..types.game import Game as GameType

    store = get_store_from_info(info)

    with store.games.locked() as games:
        require_record(games, id, "Game")
        games.remove_where(lambda g: g.id == id)
        remaining = games.list()

    orphaned = len(store.reviews.filter(lambda r: r.game_id == id))
    logger.info("Game deleted", game_id=id, remaining=len(remaining), orphaned_reviews=orphaned)
    if orphaned:
        logger.warning("Reviews left without a game", game_id=id, count=orphaned)

    return [GameType.from_record(record) for record in remaining]


async def update_game(info: strawberry.Info, id: str, edits: "EditGameInput") -> "Game":
    """
    Shallow-merge edits into an existing game.

    Title uniqueness and platform values are only checked when a game is added.
    """
    from ..types.game import Game as GameType

    store = get_store_from_info(info)
    changes = provided_fields(edits)

    with store.games.locked() as games:
        record = require_record(games, id, "Game").merged(changes)
        games.replace(record)

    logger.info("Game updated", game_id=id, updated_fields=sorted(changes))
    return GameType.from_record(record)
