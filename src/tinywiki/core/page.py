"""Wiki page entity."""

from dataclasses import dataclass


@dataclass
class Page:
    """A wiki page identified by its title.

    The title is validated by the router before a page is built, so any
    string is accepted here.
    """

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 for rendering."""
        return self.body.decode("utf-8", errors="replace")
