"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from blogql.engine import MutationExecutor, QueryExecutor, RelationshipResolver
from blogql.store import EntityStore, demo_store


@pytest.fixture
def store() -> EntityStore:
    """A freshly seeded store, never shared between tests."""
    return demo_store()


@pytest.fixture
def queries(store: EntityStore) -> QueryExecutor:
    return QueryExecutor(store)


@pytest.fixture
def mutations(store: EntityStore) -> MutationExecutor:
    return MutationExecutor(store)


@pytest.fixture
def relationships(store: EntityStore) -> RelationshipResolver:
    return RelationshipResolver(store)


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
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
