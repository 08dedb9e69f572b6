"""
Access to per-request state for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ..store.memory import ReviewStore


def get_store_from_info(info: strawberry.Info) -> "ReviewStore":
    """
    Extract the review store from the GraphQL info context.

    Raises RuntimeError when the server was wired without a store.
    """
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("Review store not found in GraphQL context")
    return store
