"""Page store contract and error taxonomy."""

from typing import Protocol

from tinywiki.core.page import Page


class StoreError(Exception):
    """Underlying I/O or database failure in a page store."""


class PageNotFoundError(StoreError):
    """Requested page does not exist in the store."""

    def __init__(self, title: str) -> None:
        super().__init__(f"page not found: {title}")
        self.title = title


class PageStore(Protocol):
    """Persistence for wiki pages, keyed by title.

    Saves replace any previous content for the title. There is no history
    and no write serialization beyond what the backend provides.
    """

    def initialize(self) -> None:
        """Prepare the backing store. Safe to call more than once."""
        ...

    def load(self, title: str) -> Page:
        """Load a page.

        Raises:
            PageNotFoundError: If no page exists for title
            StoreError: On I/O or database failure
        """
        ...

    def save(self, page: Page) -> None:
        """Create or replace a page.

        Raises:
            StoreError: On I/O or database failure
        """
        ...
