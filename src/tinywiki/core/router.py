"""Request path routing.

Maps a URL path to an ``(action, title)`` pair. Paths that do not fit the
``/<action>/<title>`` shape resolve to the view of a fixed fallback page
rather than a 404.
"""

import re
from dataclasses import dataclass

TITLE_PATTERN = r"[A-Za-z0-9]+"
PATH_PATTERN = rf"^/(|edit|save|view)/({TITLE_PATTERN})$"
DEFAULT_ACTION = "view"
DEFAULT_TITLE = "TestPage"


@dataclass(frozen=True)
class Route:
    """Resolved action and page title for a request."""

    action: str
    title: str


class Router:
    """Resolves request paths against the wiki path pattern."""

    def __init__(self, default_title: str = DEFAULT_TITLE) -> None:
        """Initialize router.

        Args:
            default_title: Title served for paths that do not match

        Raises:
            ValueError: If default_title could never match the path pattern
        """
        if not self.is_valid_title(default_title):
            raise ValueError(f"Default title is not routable: {default_title!r}")
        self._pattern = re.compile(PATH_PATTERN)
        self._default_title = default_title

    @staticmethod
    def is_valid_title(title: str) -> bool:
        """Return whether title can appear in a routable path."""
        return re.fullmatch(TITLE_PATTERN, title) is not None

    @property
    def default_title(self) -> str:
        """Title used for unmatched paths."""
        return self._default_title

    def resolve(self, path: str) -> Route:
        """Resolve a request path.

        Args:
            path: Decoded URL path (e.g., "/edit/FrontPage")

        Returns:
            Route with the action ("view", "edit" or "save") and title
        """
        match = self._pattern.fullmatch(path)
        if match is None:
            return Route(action=DEFAULT_ACTION, title=self._default_title)
        action, title = match.groups()
        return Route(action=action or DEFAULT_ACTION, title=title)
