"""
Shared request context for GraphQL resolvers
"""

from typing import Any

import strawberry

from ..engine import MutationExecutor, QueryExecutor, RelationshipResolver
from ..logging import get_logger
from ..store import EntityStore

logger = get_logger(__name__)


def build_context(store: EntityStore, **extra: Any) -> dict[str, Any]:
    """
    Build the execution context for one operation.

    The executors share ``store``, so a mutation earlier in an operation is
    visible to every field resolved after it.

    Args:
        store: Store the operation reads and writes
        **extra: Additional entries (e.g. the HTTP request)

    Returns:
        Context dictionary handed to strawberry
    """
    return {
        "store": store,
        "queries": QueryExecutor(store),
        "mutations": MutationExecutor(store),
        "relationships": RelationshipResolver(store),
        **extra,
    }


def _from_context(info: strawberry.Info, key: str) -> Any:
    value = info.context.get(key)
    if value is None:
        logger.error("Missing entry in GraphQL context", key=key)
        raise RuntimeError(f"GraphQL context has no '{key}'")
    return value


def get_queries_from_info(info: strawberry.Info) -> QueryExecutor:
    return _from_context(info, "queries")


def get_mutations_from_info(info: strawberry.Info) -> MutationExecutor:
    return _from_context(info, "mutations")


def get_relationships_from_info(info: strawberry.Info) -> RelationshipResolver:
    return _from_context(info, "relationships")
