"""aiohttp server for tinywiki.

Application factory and listener setup. The server either listens on a
fixed host and port, or binds an OS-assigned loopback port and records the
address in a file so test harnesses can find it.
"""

import logging
import socket
from pathlib import Path

from aiohttp import web

from tinywiki.app_keys import router_key, store_key, templates_key
from tinywiki.config import Config
from tinywiki.core.router import Router
from tinywiki.handlers import create_wiki_routes
from tinywiki.store import create_store
from tinywiki.templates import create_environment

logger = logging.getLogger(__name__)

EPHEMERAL_HOST = "127.0.0.1"


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Builds and initializes the page store, so the backing directory or
    database table exists before the first request.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        StoreError: If the page store cannot be initialized
        FileNotFoundError: If the templates directory is missing
    """
    app = web.Application()

    store = create_store(config.store)
    store.initialize()

    app[store_key] = store
    app[templates_key] = create_environment(config.wiki.templates_dir)
    app[router_key] = Router(config.wiki.default_title)

    app.router.add_routes(create_wiki_routes())

    return app


def bind_ephemeral(port_file: Path) -> socket.socket:
    """Bind a loopback socket on an OS-assigned port.

    The bound address is written to port_file as ``host:port`` before
    returning.

    Args:
        port_file: File receiving the bound address

    Returns:
        Listening socket

    Raises:
        OSError: If binding or writing the port file fails
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((EPHEMERAL_HOST, 0))
        sock.listen()
        host, port = sock.getsockname()
        port_file.write_text(f"{host}:{port}", encoding="utf-8")
    except OSError:
        sock.close()
        raise
    logger.info(f"Listening on {host}:{port} (written to {port_file})")
    return sock


def run_server(config: Config) -> None:
    """Run the server until interrupted.

    Args:
        config: Application configuration
    """
    app = create_app(config)

    if config.server.ephemeral:
        sock = bind_ephemeral(config.server.port_file)
        web.run_app(app, sock=sock, print=None)
        return

    web.run_app(app, host=config.server.host, port=config.server.port)
