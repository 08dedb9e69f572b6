from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from .common import provided_fields, require_record

if TYPE_CHECKING:
    from ..mutations.root import EditAuthorInput
    from ..types.author import Author
    from ..types.review import Review

logger = get_logger(__name__)


async def resolve_authors(info: strawberry.Info) -> list["Author"]:
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    return [AuthorType.from_record(record) for record in store.authors.list()]


async def resolve_author_by_id(info: strawberry.Info, id: str) -> "Author":
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    return AuthorType.from_record(require_record(store.authors, id, "Author"))


async def resolve_author_reviews(author: "Author", info: strawberry.Info) -> list["Review"]:
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    return [
        ReviewType.from_record(record)
        for record in store.reviews.filter(lambda r: r.author_id == author.id)
    ]


async def update_author(info: strawberry.Info, id: str, edits: "EditAuthorInput") -> "Author":
    """Shallow-merge edits into an existing author."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    changes = provided_fields(edits)

    with store.authors.locked() as authors:
        record = require_record(authors, id, "Author").merged(changes)
        authors.replace(record)

    logger.info("Author updated", author_id=id, updated_fields=sorted(changes))
    return AuthorType.from_record(record)
