"""
Main FastAPI application for the blogql server
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import EntityStore, demo_store

# Configure logging before creating logger; debug mode always logs at DEBUG
configure_logging(
    debug=settings.debug,
    level=None if settings.debug else logging.getLevelName(settings.log_level.upper()),
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: EntityStore = app.state.store
    logger.info(
        "The server is up!",
        users=len(store.users),
        posts=len(store.posts),
        comments=len(store.comments),
        environment=settings.environment,
    )

    yield

    logger.info("Shutting down blogql API...")


def create_app(store: EntityStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store backing the GraphQL endpoint. Defaults to the demo data
            when ``seed_demo_data`` is enabled, otherwise an empty store.
    """
    if store is None:
        store = demo_store() if settings.seed_demo_data else EntityStore()

    app = FastAPI(
        title="blogql API",
        description="GraphQL API over users, posts and comments",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        # Validate schema at startup so a broken schema never serves requests
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, graphiql=settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blogql.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
