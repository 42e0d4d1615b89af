#!/usr/bin/env python3
"""
Main CLI entry point for Startupboard backend server.
"""

import os
import sys

import click
import uvicorn

from startupboard import __version__
from startupboard.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="startupboard")
def cli() -> None:
    """Startupboard CLI - run the API server."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Startupboard API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Startupboard API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Settings are read at import time in each worker process
    if log_level == "debug":
        os.environ["STARTUPBOARD_DEBUG"] = "true"
        os.environ["STARTUPBOARD_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("STARTUPBOARD_DEBUG", "false")
        os.environ.setdefault("STARTUPBOARD_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "startupboard.api.app:app",
            host=host,
            port=port,
            reload=reload,
            workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
