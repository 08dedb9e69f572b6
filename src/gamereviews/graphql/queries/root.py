"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.game import Game
from ..types.review import Review


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def games(self, info: strawberry.Info) -> list[Game]:
        """Get all games."""
        from ..resolvers.game import resolve_games

        return await resolve_games(info)

    @strawberry.field
    async def game(self, info: strawberry.Info, id: strawberry.ID) -> Game | None:
        """Get a game by ID."""
        from ..resolvers.game import resolve_game_by_id

        return await resolve_game_by_id(info, id)

    @strawberry.field
    async def reviews(self, info: strawberry.Info) -> list[Review]:
        """Get all reviews."""
        from ..resolvers.review import resolve_reviews

        return await resolve_reviews(info)

    @strawberry.field
    async def review(self, info: strawberry.Info, id: strawberry.ID) -> Review | None:
        """Get a review by ID."""
        from ..resolvers.review import resolve_review_by_id

        return await resolve_review_by_id(info, id)

    @strawberry.field
    async def authors(self, info: strawberry.Info) -> list[Author]:
        """Get all authors."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info)

    @strawberry.field
    async def author(self, info: strawberry.Info, id: strawberry.ID) -> Author | None:
        """Get an author by ID."""
        from ..resolvers.author import resolve_author_by_id

        return await resolve_author_by_id(info, id)
