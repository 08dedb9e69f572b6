#!/usr/bin/env python3
"""
Main CLI entry point for the game reviews server.
"""

import json
import os
import sys
from pathlib import Path

import click
import uvicorn

from gamereviews import __version__
from gamereviews.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="gamereviews")
def cli() -> None:
    """Game reviews CLI - run the server and inspect schema and seed data."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    help="Port to bind to (default: 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--seed-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file to seed the store from (default: built-in dataset)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    seed_file: str | None,
    log_level: str,
) -> None:
    """Start the game reviews API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting game reviews API server",
        host=host,
        port=port,
        reload=reload,
        seed_file=seed_file,
        log_level=log_level,
    )

    # The app reads its settings from the environment at import time
    if log_level == "debug":
        os.environ["GAMEREVIEWS_DEBUG"] = "true"
    else:
        os.environ.setdefault("GAMEREVIEWS_DEBUG", "false")
    os.environ["GAMEREVIEWS_LOG_LEVEL"] = log_level
    if seed_file:
        os.environ["GAMEREVIEWS_SEED_DATA_PATH"] = str(Path(seed_file).resolve())

    try:
        # The store lives in one process, so a single worker only
        uvicorn.run(
            "gamereviews.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema as SDL."""
    from gamereviews.graphql.schema import export_schema

    sdl = export_schema()
    if output:
        Path(output).write_text(sdl + "\n", encoding="utf-8")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


@cli.command("check-seed")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format (default: table)",
)
def check_seed(path: str, output_format: str) -> None:
    """Validate a JSON seed file against the store invariants."""
    from gamereviews.errors import SeedDataError
    from gamereviews.store.seed_data import build_store
    from gamereviews.validation import validate_store_integrity

    configure_logging(level="warning")

    try:
        store = build_store(seed_path=path)
    except SeedDataError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    results = validate_store_integrity(store)

    if output_format == "json":
        click.echo(json.dumps(results, indent=2))
    else:
        counts = results["counts"]
        click.echo(
            f"Games: {counts['games']}  Reviews: {counts['reviews']}  Authors: {counts['authors']}"
        )
        for error in results["errors"]:
            click.echo(f"✗ {error}")
        for warning in results["warnings"]:
            click.echo(f"⚠ {warning}")
        if results["valid"] and not results["warnings"]:
            click.echo("✓ Seed data is consistent")

    if not results["valid"] or results["warnings"]:
        sys.exit(1)


@cli.command("dump-seed")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the dataset to this file instead of stdout",
)
def dump_seed(output: str | None) -> None:
    """Print the built-in seed dataset as JSON."""
    from gamereviews.store.seed_data import DEFAULT_SEED

    text = json.dumps(DEFAULT_SEED, indent=2)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        click.echo(f"✓ Seed data written to {output}")
    else:
        click.echo(text)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
