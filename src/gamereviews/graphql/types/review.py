"""
Review GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...store.records import ReviewRecord
    from .author import Author
    from .game import Game


@strawberry.type
class Review:
    """Review type for GraphQL API.

    ``author_id`` and ``game_id`` stay off the schema; clients reach the
    related records through the ``author`` and ``game`` fields.
    """

    id: strawberry.ID
    rating: int | None
    content: str | None
    author_id: strawberry.Private[str]
    game_id: strawberry.Private[str]

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this review, or null if the author no longer exists."""
        from ..resolvers.review import resolve_review_author

        return await resolve_review_author(self, info)

    @strawberry.field
    async def game(
        self, info: strawberry.Info
    ) -> Annotated["Game", strawberry.lazy(".game")] | None:
        """Get the reviewed game, or null if the game no longer exists."""
        from ..resolvers.review import resolve_review_game

        return await resolve_review_game(self, info)

    @classmethod
    def from_record(cls, record: "ReviewRecord") -> "Review":
        return cls(
            id=strawberry.ID(record.id),
            rating=record.rating,
            content=record.content,
            author_id=record.author_id,
            game_id=record.game_id,
        )
