"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...store.records import AuthorRecord
    from .review import Review


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    name: str | None
    verified: bool | None

    @strawberry.field
    async def reviews(
        self, info: strawberry.Info
    ) -> list[Annotated["Review", strawberry.lazy(".review")]]:
        """Get reviews written by this author."""
        from ..resolvers.author import resolve_author_reviews

        return await resolve_author_reviews(self, info)

    @classmethod
    def from_record(cls, record: "AuthorRecord") -> "Author":
        return cls(id=strawberry.ID(record.id), name=record.name, verified=record.verified)
