"""Configuration management for tinywiki.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from tinywiki.core.router import Router

CONFIG_FILENAME = "tinywiki.toml"

STORE_BACKENDS = ("file", "sqlite")


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    ephemeral: bool = False
    port_file: Path = field(default_factory=lambda: Path("final-port.txt"))


@dataclass
class StoreConfig:
    """Page store configuration."""

    backend: str = "sqlite"
    data_dir: Path = field(default_factory=lambda: Path("data"))
    database: Path = field(default_factory=lambda: Path("wiki.db"))


@dataclass
class WikiConfig:
    """Wiki behaviour configuration."""

    default_title: str = "TestPage"
    templates_dir: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    store: StoreConfig
    wiki: WikiConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for tinywiki.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        """Create config with all defaults."""
        return cls(
            server=ServerConfig(),
            store=StoreConfig(),
            wiki=WikiConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server"), config_dir),
            store=cls._parse_store(data.get("store"), config_dir),
            wiki=cls._parse_wiki(data.get("wiki"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object, config_dir: Path) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig(port_file=config_dir / "final-port.txt")

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "0.0.0.0")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        ephemeral = data.get("ephemeral", False)
        if not isinstance(ephemeral, bool):
            raise ValueError("server.ephemeral must be a boolean")

        port_file = data.get("port_file", "final-port.txt")
        if not isinstance(port_file, str):
            raise ValueError("server.port_file must be a string")

        return ServerConfig(
            host=host,
            port=port,
            ephemeral=ephemeral,
            port_file=config_dir / port_file,
        )

    @classmethod
    def _parse_store(cls, data: object, config_dir: Path) -> StoreConfig:
        """Parse store configuration section.

        Args:
            data: Raw store section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            StoreConfig instance
        """
        if data is None:
            return StoreConfig(
                data_dir=config_dir / "data",
                database=config_dir / "wiki.db",
            )

        if not isinstance(data, dict):
            raise ValueError("store section must be a dictionary")

        backend = data.get("backend", "sqlite")
        if backend not in STORE_BACKENDS:
            raise ValueError(
                f"store.backend must be one of: {', '.join(STORE_BACKENDS)}",
            )

        data_dir = data.get("data_dir", "data")
        if not isinstance(data_dir, str):
            raise ValueError("store.data_dir must be a string")

        database = data.get("database", "wiki.db")
        if not isinstance(database, str):
            raise ValueError("store.database must be a string")

        return StoreConfig(
            backend=backend,
            data_dir=config_dir / data_dir,
            database=config_dir / database,
        )

    @classmethod
    def _parse_wiki(cls, data: object, config_dir: Path) -> WikiConfig:
        """Parse wiki configuration section.

        Args:
            data: Raw wiki section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            WikiConfig instance
        """
        if data is None:
            return WikiConfig()

        if not isinstance(data, dict):
            raise ValueError("wiki section must be a dictionary")

        default_title = data.get("default_title", "TestPage")
        if not isinstance(default_title, str) or not Router.is_valid_title(
            default_title,
        ):
            raise ValueError(
                "wiki.default_title must contain only ASCII letters and digits",
            )

        templates_dir = data.get("templates_dir")
        if templates_dir is not None and not isinstance(templates_dir, str):
            raise ValueError("wiki.templates_dir must be a string")

        return WikiConfig(
            default_title=default_title,
            templates_dir=config_dir / templates_dir if templates_dir else None,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        ephemeral: bool | None = None,
        backend: str | None = None,
        data_dir: Path | None = None,
        database: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            ephemeral: Override server.ephemeral
            backend: Override store.backend
            data_dir: Override store.data_dir
            database: Override store.database

        Returns:
            New Config instance with overrides applied
        """
        server = replace(
            self.server,
            host=host if host is not None else self.server.host,
            port=port if port is not None else self.server.port,
            ephemeral=ephemeral if ephemeral is not None else self.server.ephemeral,
        )

        if backend is not None and backend not in STORE_BACKENDS:
            raise ValueError(
                f"store.backend must be one of: {', '.join(STORE_BACKENDS)}",
            )
        store = replace(
            self.store,
            backend=backend if backend is not None else self.store.backend,
            data_dir=data_dir if data_dir is not None else self.store.data_dir,
            database=database if database is not None else self.store.database,
        )

        return replace(self, server=server, store=store)
