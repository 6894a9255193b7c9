"""File-backed page store.

Layout:
    data/
    ├── FrontPage.txt
    └── TestPage.txt

Each file holds the raw page body. A missing or unreadable file is a
missing page; other read failures are store errors. Concurrent saves to
the same title are not serialized; the last write wins.
"""

import logging
import os
from pathlib import Path

from tinywiki.core.page import Page
from tinywiki.store.base import PageNotFoundError, StoreError

logger = logging.getLogger(__name__)

FILE_MODE = 0o600


class FileStore:
    """Stores each page as ``<data_dir>/<title>.txt``."""

    def __init__(self, data_dir: Path) -> None:
        """Initialize store with directory path.

        Args:
            data_dir: Directory holding page files
        """
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        """Directory holding page files."""
        return self._data_dir

    def path_for(self, title: str) -> Path:
        """Return the file path for a page title."""
        return self._data_dir / f"{title}.txt"

    def initialize(self) -> None:
        """Create the data directory if it doesn't exist.

        Raises:
            StoreError: If the directory cannot be created
        """
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"cannot create data directory {self._data_dir}: {e}") from e
        logger.info(f"Using file store at {self._data_dir}")

    def load(self, title: str) -> Page:
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
            raise PageNotFoundError(title) from e
        except OSError as e:
            raise StoreError(f"cannot read {path}: {e}") from e
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        path = self.path_for(page.title)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            raise StoreError(f"cannot write {path}: {e}") from e
        logger.debug(f"Wrote {len(page.body)} bytes to {path}")
