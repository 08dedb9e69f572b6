"""
Game GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...store.records import GameRecord
    from .review import Review


@strawberry.type
class Game:
    """Game type for GraphQL API."""

    id: strawberry.ID
    title: str
    platform: list[str]

    @strawberry.field
    async def reviews(
        self, info: strawberry.Info
    ) -> list[Annotated["Review", strawberry.lazy(".review")]]:
        """Get reviews written about this game."""
        from ..resolvers.game import resolve_game_reviews

        return await resolve_game_reviews(self, info)

    @classmethod
    def from_record(cls, record: "GameRecord") -> "Game":
        return cls(id=strawberry.ID(record.id), title=record.title, platform=list(record.platform))
