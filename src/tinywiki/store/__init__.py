"""Page persistence backends."""

from tinywiki.config import StoreConfig
from tinywiki.store.base import PageNotFoundError, PageStore, StoreError
from tinywiki.store.files import FileStore
from tinywiki.store.sqlite import SqliteStore

__all__ = [
    "FileStore",
    "PageNotFoundError",
    "PageStore",
    "SqliteStore",
    "StoreError",
    "create_store",
]


def create_store(config: StoreConfig) -> PageStore:
    """Build the page store selected by configuration.

    Args:
        config: Store configuration

    Returns:
        Uninitialized store instance

    Raises:
        ValueError: If the backend name is unknown
    """
    if config.backend == "file":
        return FileStore(config.data_dir)
    if config.backend == "sqlite":
        return SqliteStore(config.database)
    raise ValueError(f"Unknown store backend: {config.backend}")
