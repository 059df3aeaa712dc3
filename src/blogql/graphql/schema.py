"""
Main GraphQL schema definition using Strawberry
"""

import json
from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionResult

from ..logging import get_logger
from ..store import EntityStore, demo_store
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    This ensures that all type references can be resolved, causing the
    server to fail fast rather than returning errors at runtime.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def print_schema() -> str:
    """Return the schema in SDL form."""
    return schema.as_str()


def _log_errors(result: ExecutionResult, operation_name: str | None) -> None:
    if result.errors:
        logger.info(
            "Operation completed with errors",
            operation_name=operation_name,
            errors=[error.message for error in result.errors],
        )


async def execute_operation(
    source: str,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
    store: EntityStore | None = None,
) -> ExecutionResult:
    """
    Validate and execute a GraphQL document.

    Args:
        source: GraphQL document text
        variables: Variable values for the operation
        operation_name: Operation to run when the document defines several
        store: Store to resolve against (a fresh demo store if None)

    Returns:
        ExecutionResult with ``data`` shaped like the selection and any errors
    """
    if store is None:
        store = demo_store()

    result = await schema.execute(
        source,
        variable_values=variables,
        operation_name=operation_name,
        context_value=build_context(store),
    )
    _log_errors(result, operation_name)
    return result


def execute_operation_sync(
    source: str,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
    store: EntityStore | None = None,
) -> ExecutionResult:
    """Synchronous counterpart of :func:`execute_operation`."""
    if store is None:
        store = demo_store()

    result = schema.execute_sync(
        source,
        variable_values=variables,
        operation_name=operation_name,
        context_value=build_context(store),
    )
    _log_errors(result, operation_name)
    return result


class StoreGraphQLRouter(GraphQLRouter[dict[str, Any], None]):
    """GraphQL router that answers undecodable request bodies with a 400."""

    def decode_json(self, data: str | bytes) -> object:
        try:
            return json.loads(data)
        except UnicodeDecodeError as e:
            # Surfaces as strawberry's "Unable to parse request body as JSON"
            raise json.JSONDecodeError("Request body is not valid UTF-8", "", 0) from e


# Create the GraphQL router for FastAPI integration
def create_graphql_router(
    store: EntityStore, graphiql: bool = True
) -> StoreGraphQLRouter:
    """Create a GraphQL router for FastAPI bound to ``store``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(store, request=request)

    return StoreGraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
