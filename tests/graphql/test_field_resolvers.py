"""
Unit tests for relationship field resolvers
"""

import pytest

from gamereviews.graphql.resolvers.author import resolve_author_reviews
from gamereviews.graphql.resolvers.game import resolve_game_by_id, resolve_game_reviews
from gamereviews.graphql.resolvers.review import (
    resolve_review_author,
    resolve_review_by_id,
    resolve_review_game,
)
from gamereviews.graphql.types.author import Author
from gamereviews.graphql.types.game import Game
from gamereviews.graphql.types.review import Review
from gamereviews.store import ReviewRecord


class TestGameReviews:
    """Tests for resolve_game_reviews field resolver."""

    @pytest.mark.asyncio
    async def test_returns_matching_reviews_only(self, mock_info, store):
        game = await resolve_game_by_id(mock_info, "1")

        result = await resolve_game_reviews(game, mock_info)

        expected = [r.id for r in store.reviews.list() if r.game_id == "1"]
        assert [review.id for review in result] == expected
        assert all(review.game_id == "1" for review in result)

    @pytest.mark.asyncio
    async def test_independent_of_collection_order(self, mock_info, store):
        store.reviews.replace_all(reversed(store.reviews.list()))
        game = Game(id="1", title="Zelda, Tears of the Kingdom", platform=["Switch"])

        result = await resolve_game_reviews(game, mock_info)

        assert {review.id for review in result} == {
            r.id for r in store.reviews.list() if r.game_id == "1"
        }

    @pytest.mark.asyncio
    async def test_game_without_reviews(self, zelda_info):
        game = Game(id="1", title="Zelda", platform=["Switch"])

        assert await resolve_game_reviews(game, zelda_info) == []


class TestAuthorReviews:
    """Tests for resolve_author_reviews field resolver."""

    @pytest.mark.asyncio
    async def test_returns_reviews_by_author(self, mock_info, store):
        author = Author(id="2", name="yoshi", verified=False)

        result = await resolve_author_reviews(author, mock_info)

        assert [review.id for review in result] == [
            r.id for r in store.reviews.list() if r.author_id == "2"
        ]


class TestReviewRelations:
    """Tests for resolve_review_author and resolve_review_game."""

    @pytest.mark.asyncio
    async def test_resolves_author_and_game(self, mock_info):
        review = await resolve_review_by_id(mock_info, "1")

        author = await resolve_review_author(review, mock_info)
        game = await resolve_review_game(review, mock_info)

        assert author.id == "1"
        assert author.name == "mario"
        assert game.id == "2"
        assert game.title == "Final Fantasy 7 Remake"

    @pytest.mark.asyncio
    async def test_dangling_keys_resolve_to_none(self, zelda_info, zelda_store):
        """Field resolvers return None where root lookups would raise."""
        zelda_store.reviews.insert(
            ReviewRecord(id="r1", rating=3, content="Gone", author_id="404", game_id="404")
        )
        review = Review.from_record(zelda_store.reviews.get("r1"))

        assert await resolve_review_author(review, zelda_info) is None
        assert await resolve_review_game(review, zelda_info) is None
