#!/usr/bin/env python3
"""
Main CLI entry point for the blogql server.
"""

import json
import logging
import os
import sys

import click
import uvicorn

from blogql import __version__
from blogql.config import settings
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """blogql CLI - serve the GraphQL API or run single operations."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the GraphQL API server.

    The server runs a single worker: the store lives in process memory.
    """
    level = logging.getLevelName(log_level.upper())
    configure_logging(debug=(log_level == "debug"), level=level)

    logger.info(
        "Starting blogql API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The reload worker is a fresh process: hand it the level via the environment
    os.environ["BLOGQL_DEBUG"] = "true" if log_level == "debug" else "false"
    os.environ["BLOGQL_LOG_LEVEL"] = log_level

    # In this process the settings object already exists
    settings.debug = log_level == "debug"
    settings.log_level = log_level

    try:
        if reload:
            uvicorn.run(
                "blogql.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from blogql.api.app import app

            # Importing the app may have configured logging from earlier settings
            configure_logging(debug=settings.debug, level=level)
            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.argument("document")
@click.option(
    "--variables",
    default=None,
    help="Operation variables as a JSON object",
)
@click.option(
    "--operation-name",
    default=None,
    help="Operation to run when the document defines several",
)
def query(document: str, variables: str | None, operation_name: str | None) -> None:
    """Run one GraphQL operation against a freshly seeded store.

    DOCUMENT is the GraphQL text, or '-' to read it from stdin. The result is
    printed as JSON; the exit code is 1 if the result carries errors.
    """
    from blogql.graphql.schema import execute_operation_sync

    # Errors are reported in the JSON payload; keep stdout parseable
    configure_logging(debug=False, level=logging.CRITICAL)

    if document == "-":
        document = sys.stdin.read()

    variable_values = None
    if variables:
        try:
            variable_values = json.loads(variables)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--variables")
        if not isinstance(variable_values, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--variables")

    result = execute_operation_sync(
        document, variables=variable_values, operation_name=operation_name
    )

    payload: dict = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]

    click.echo(json.dumps(payload, indent=2))
    if result.errors:
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from blogql.graphql.schema import print_schema

    click.echo(print_schema())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
