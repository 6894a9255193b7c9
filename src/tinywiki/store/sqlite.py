"""SQLite-backed page store.

All pages live in a single ``wiki`` table with one row per title. Every
operation opens its own connection.
"""

import logging
import sqlite3
from pathlib import Path

from tinywiki.core.page import Page
from tinywiki.store.base import PageNotFoundError, StoreError

logger = logging.getLogger(__name__)

TABLE_NAME = "wiki"

CREATE_TABLE_SQL = (
    "CREATE TABLE wiki(id INTEGER NOT NULL PRIMARY KEY, title TEXT, body BLOB)"
)
TABLE_EXISTS_SQL = "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?"
# Reusing the existing id makes REPLACE overwrite the row in place.
UPSERT_SQL = (
    "INSERT OR REPLACE INTO wiki VALUES((SELECT id FROM wiki WHERE title = ?), ?, ?)"
)
SELECT_BODY_SQL = "SELECT body FROM wiki WHERE title = ?"


class SqliteStore:
    """Stores pages as rows of a single SQLite table."""

    def __init__(self, database: Path) -> None:
        """Initialize store with database path.

        Args:
            database: SQLite database file, created on first use
        """
        self._database = database

    @property
    def database(self) -> Path:
        """SQLite database file."""
        return self._database

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self._database))

    def initialize(self) -> None:
        """Create the wiki table if it doesn't exist.

        Raises:
            StoreError: If the database cannot be opened or the table created
        """
        try:
            conn = self._connect()
            try:
                with conn:
                    exists = conn.execute(TABLE_EXISTS_SQL, (TABLE_NAME,)).fetchone()
                    if exists is None:
                        logger.info(f"Table {TABLE_NAME} missing in {self._database}, creating")
                        conn.execute(CREATE_TABLE_SQL)
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StoreError(f"cannot initialize {self._database}: {e}") from e

    def load(self, title: str) -> Page:
        try:
            conn = self._connect()
            try:
                row = conn.execute(SELECT_BODY_SQL, (title,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

        if row is None:
            raise PageNotFoundError(title)
        body = row[0]
        if body is None:
            return Page(title=title)
        if isinstance(body, str):
            body = body.encode("utf-8")
        return Page(title=title, body=bytes(body))

    def save(self, page: Page) -> None:
        try:
            conn = self._connect()
            try:
                with conn:
                    conn.execute(
                        UPSERT_SQL,
                        (page.title, page.title, sqlite3.Binary(page.body)),
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        logger.debug(f"Saved page {page.title} ({len(page.body)} bytes)")
