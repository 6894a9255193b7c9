"""CLI interface for tinywiki.

Command-line tool for running the wiki server.
"""

import logging
import sys
from pathlib import Path

import click

from tinywiki.config import STORE_BACKENDS, Config


@click.group()
def cli() -> None:
    """tinywiki - a small wiki with bracket links."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover tinywiki.toml)",
)
@click.option(
    "--addr",
    is_flag=True,
    help="Bind an open loopback port and write it to final-port.txt",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--backend",
    type=click.Choice(STORE_BACKENDS),
    default=None,
    help="Page store backend (overrides config)",
)
@click.option(
    "--data-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory for the file store (overrides config)",
)
@click.option(
    "--database",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="SQLite database for the table store (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    addr: bool,
    host: str | None,
    port: int | None,
    backend: str | None,
    data_dir: Path | None,
    database: Path | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from tinywiki.server import run_server

    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            ephemeral=True if addr else None,
            backend=backend,
            data_dir=data_dir,
            database=database,
        )
    except (OSError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if config.server.ephemeral:
        click.echo(f"Starting server on an open port (see {config.server.port_file})")
    else:
        click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    if config.store.backend == "file":
        click.echo(f"File store: {config.store.data_dir}")
    else:
        click.echo(f"SQLite store: {config.store.database}")

    try:
        run_server(config)
    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    """Set up root logging for the server process."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()
