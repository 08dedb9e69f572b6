"""
Tests for root query resolvers
"""

import pytest

from gamereviews.errors import NotFoundError
from gamereviews.graphql.resolvers.author import resolve_author_by_id, resolve_authors
from gamereviews.graphql.resolvers.game import resolve_game_by_id, resolve_games
from gamereviews.graphql.resolvers.review import resolve_review_by_id, resolve_reviews
from gamereviews.graphql.types.author import Author
from gamereviews.graphql.types.game import Game
from gamereviews.graphql.types.review import Review
from gamereviews.store import DEFAULT_SEED


class TestListQueries:
    """Tests for the games, reviews and authors queries."""

    @pytest.mark.asyncio
    async def test_games_in_store_order(self, mock_info):
        result = await resolve_games(mock_info)

        assert all(isinstance(game, Game) for game in result)
        assert [game.id for game in result] == [g["id"] for g in DEFAULT_SEED["games"]]

    @pytest.mark.asyncio
    async def test_reviews_in_store_order(self, mock_info):
        result = await resolve_reviews(mock_info)

        assert all(isinstance(review, Review) for review in result)
        assert [review.id for review in result] == [r["id"] for r in DEFAULT_SEED["reviews"]]

    @pytest.mark.asyncio
    async def test_authors_in_store_order(self, mock_info):
        result = await resolve_authors(mock_info)

        assert all(isinstance(author, Author) for author in result)
        assert [author.name for author in result] == [a["name"] for a in DEFAULT_SEED["authors"]]

    @pytest.mark.asyncio
    async def test_empty_collections(self, zelda_info):
        assert await resolve_reviews(zelda_info) == []


class TestLookupQueries:
    """Tests for the game, review and author lookups by id."""

    @pytest.mark.asyncio
    async def test_game_by_id(self, mock_info):
        game = await resolve_game_by_id(mock_info, "3")

        assert game.title == "Elden Ring"
        assert game.platform == ["PS5", "Xbox", "PC"]

    @pytest.mark.asyncio
    async def test_review_by_id(self, mock_info):
        review = await resolve_review_by_id(mock_info, "1")

        assert review.rating == 9
        assert review.author_id == "1"
        assert review.game_id == "2"

    @pytest.mark.asyncio
    async def test_author_by_id(self, mock_info):
        author = await resolve_author_by_id(mock_info, "2")

        assert author.name == "yoshi"
        assert author.verified is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("resolver", "entity"),
        [
            (resolve_game_by_id, "Game"),
            (resolve_review_by_id, "Review"),
            (resolve_author_by_id, "Author"),
        ],
    )
    async def test_missing_id_raises_not_found(self, mock_info, resolver, entity):
        with pytest.raises(NotFoundError) as exc_info:
            await resolver(mock_info, "999")

        assert exc_info.value.entity == entity
        assert exc_info.value.id == "999"
        assert str(exc_info.value) == f"{entity} with id 999 not found"
        assert exc_info.value.extensions["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_store_in_context(self, mock_info):
        mock_info.context = {}

        with pytest.raises(RuntimeError, match="store not found"):
            await resolve_games(mock_info)
