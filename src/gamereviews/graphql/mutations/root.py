"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.author import Author
from ..types.game import Game
from ..types.review import Review


# Input types for mutations
@strawberry.input
class AddGameInput:
    """Input for adding a new game."""

    title: str
    platform: list[str]


@strawberry.input
class EditGameInput:
    """Input for editing a game. Omitted fields keep their current value."""

    title: str | None = strawberry.UNSET
    platform: list[str] | None = strawberry.UNSET


@strawberry.input
class AddReviewInput:
    """Input for adding a review of an existing game by an existing author."""

    rating: int
    content: str
    author_id: strawberry.ID = strawberry.field(name="author_id")
    game_id: strawberry.ID = strawberry.field(name="game_id")


@strawberry.input
class EditAuthorInput:
    """Input for editing an author. Omitted fields keep their current value."""

    name: str | None = strawberry.UNSET
    verified: bool | None = strawberry.UNSET


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Game mutations
    @strawberry.mutation(name="addGame")
    async def add_game(self, info: strawberry.Info, game: AddGameInput) -> Game | None:
        """Add a new game."""
        from ..resolvers.game import add_game

        return await add_game(info, game)

    @strawberry.mutation(name="deleteGame")
    async def delete_game(self, info: strawberry.Info, id: strawberry.ID) -> list[Game]:
        """Delete a game and return the remaining games."""
        from ..resolvers.game import delete_game

        return await delete_game(info, id)

    @strawberry.mutation(name="updateGame")
    async def update_game(
        self, info: strawberry.Info, id: strawberry.ID, edits: EditGameInput
    ) -> Game | None:
        """Update fields of an existing game."""
        from ..resolvers.game import update_game

        return await update_game(info, id, edits)

    # Review mutations
    @strawberry.mutation(name="addReview")
    async def add_review(self, info: strawberry.Info, review: AddReviewInput) -> Review | None:
        """Add a review."""
        from ..resolvers.review import add_review

        return await add_review(info, review)

    @strawberry.mutation(name="deleteReview")
    async def delete_review(self, info: strawberry.Info, id: strawberry.ID) -> list[Review]:
        """Delete a review and return the remaining reviews."""
        from ..resolvers.review import delete_review

        return await delete_review(info, id)

    # Author mutations
    @strawberry.mutation(name="updateAuthor")
    async def update_author(
        self, info: strawberry.Info, id: strawberry.ID, edits: EditAuthorInput
    ) -> Author | None:
        """Update fields of an existing author."""
        from ..resolvers.author import update_author

        return await update_author(info, id, edits)
