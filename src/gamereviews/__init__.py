"""
Game reviews GraphQL service
In-memory games, reviews and authors behind a Strawberry GraphQL API
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
