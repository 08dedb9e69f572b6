"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from gamereviews.store import CounterIdGenerator, DEFAULT_SEED, ReviewStore


@pytest.fixture
def store() -> ReviewStore:
    """A store holding the built-in dataset, with counter ids for new records."""
    return ReviewStore.from_seed(DEFAULT_SEED, id_generator=CounterIdGenerator(start=100))


@pytest.fixture
def zelda_store() -> ReviewStore:
    """A store with one game (Zelda) and one author (Alice)."""
    return ReviewStore.from_seed(
        {
            "games": [{"id": "1", "title": "Zelda", "platform": ["Switch"]}],
            "authors": [{"id": "1", "name": "Alice"}],
        }
    )


def make_info(store: ReviewStore) -> Any:
    info = MagicMock(spec=strawberry.Info)
    info.context = {"store": store}
    return info


@pytest.fixture
def mock_info(store: ReviewStore) -> Any:
    """Create a mock GraphQL info object carrying the seeded store."""
    return make_info(store)


@pytest.fixture
def zelda_info(zelda_store: ReviewStore) -> Any:
    return make_info(zelda_store)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
