from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store.records import ReviewRecord
from ..context import get_store_from_info
from .common import require_record

if TYPE_CHECKING:
    from ..mutations.root import AddReviewInput
    from ..types.author import Author
    from ..types.game import Game
    from ..types.review import Review

logger = get_logger(__name__)


# Query resolvers
async def resolve_reviews(info: strawberry.Info) -> list["Review"]:
    """Resolve every review in store order."""
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    return [ReviewType.from_record(record) for record in store.reviews.list()]


async def resolve_review_by_id(info: strawberry.Info, id: str) -> "Review":
    """Resolve a review by ID; raises NotFoundError when absent."""
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    return ReviewType.from_record(require_record(store.reviews, id, "Review"))


# Field resolvers
async def resolve_review_author(review: "Review", info: strawberry.Info) -> "Author | None":
    """
    Resolve the author of a review.

    Returns None instead of raising when the author is missing, unlike the
    root ``author`` query.
    """
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    record = store.authors.get(review.author_id)
    if record is None:
        logger.debug("Review author missing", review_id=review.id, author_id=review.author_id)
        return None
    return AuthorType.from_record(record)


async def resolve_review_game(review: "Review", info: strawberry.Info) -> "Game | None":
    """
    Resolve the game a review is about.

    Returns None instead of raising when the game is missing, unlike the root
    ``game`` query.
    """
    from ..types.game import Game as GameType

    store = get_store_from_info(info)
    record = store.games.get(review.game_id)
    if record is None:
        logger.debug("Review game missing", review_id=review.id, game_id=review.game_id)
        return None
    return GameType.from_record(record)


# Mutation resolvers
async def add_review(info: strawberry.Info, review: "AddReviewInput") -> "Review":
    """
    Add a review for an existing author and game.

    The author is checked before the game; nothing is written unless both exist.
    """
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)

    with store.authors.locked(), store.games.locked(), store.reviews.locked() as reviews:
        require_record(store.authors, review.author_id, "Author")
        require_record(store.games, review.game_id, "Game")

        record = ReviewRecord(
            id=store.new_id(reviews),
            rating=review.rating,
            content=review.content,
            author_id=review.author_id,
            game_id=review.game_id,
        )
        reviews.insert(record)

    logger.info(
        "Review added",
        review_id=record.id,
        author_id=record.author_id,
        game_id=record.game_id,
        rating=record.rating,
    )
    return ReviewType.from_record(record)


async def delete_review(info: strawberry.Info, id: str) -> list["Review"]:
    """Delete a review and return the reviews that remain."""
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)

    with store.reviews.locked() as reviews:
        require_record(reviews, id, "Review")
        reviews.remove_where(lambda r: r.id == id)
        remaining = reviews.list()

    logger.info("Review deleted", review_id=id, remaining=len(remaining))
    return [ReviewType.from_record(record) for record in remaining]
