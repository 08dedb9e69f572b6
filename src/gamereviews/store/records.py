"""Pydantic models for records held in the store."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Platform(str, Enum):
    """Platforms a game may be released on."""

    SWITCH = "Switch"
    PS5 = "PS5"
    XBOX = "Xbox"
    PC = "PC"

    @classmethod
    def values(cls) -> list[str]:
        return [p.value for p in cls]


class Record(BaseModel):
    id: str

    def merged(self, edits: dict[str, Any]) -> Record:
        """Return a copy with ``edits`` overlaid on this record's fields."""
        return self.model_copy(update=edits)


class GameRecord(Record):
    title: str
    platform: list[str]


class ReviewRecord(Record):
    rating: int | None = None
    content: str | None = None
    author_id: str
    game_id: str


class AuthorRecord(Record):
    name: str | None = None
    verified: bool | None = None
