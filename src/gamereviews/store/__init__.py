"""In-memory storage for games, reviews and authors."""

from .ids import CounterIdGenerator, RandomIdGenerator, UUIDIdGenerator, create_id_generator
from .memory import Collection, ReviewStore
from .records import AuthorRecord, GameRecord, Platform, ReviewRecord
from .seed_data import DEFAULT_SEED, build_store, load_seed_file

__all__ = [
    "AuthorRecord",
    "Collection",
    "CounterIdGenerator",
    "DEFAULT_SEED",
    "GameRecord",
    "Platform",
    "RandomIdGenerator",
    "ReviewRecord",
    "ReviewStore",
    "UUIDIdGenerator",
    "build_store",
    "create_id_generator",
    "load_seed_file",
]
