"""Tests for request path routing."""

import pytest
from tinywiki.core.router import Route, Router


class TestRouterResolve:
    """Tests for Router.resolve()."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/view/FrontPage", Route("view", "FrontPage")),
            ("/edit/FrontPage", Route("edit", "FrontPage")),
            ("/save/FrontPage", Route("save", "FrontPage")),
            ("//FrontPage", Route("view", "FrontPage")),
            ("/view/Page2", Route("view", "Page2")),
        ],
    )
    def test__valid_path__returns_action_and_title(
        self,
        path: str,
        expected: Route,
    ) -> None:
        """Extract action and title from well-formed paths."""
        assert Router().resolve(path) == expected

    @pytest.mark.parametrize(
        "path",
        [
            "/",
            "/view/",
            "/view/bad!title",
            "/view/with space",
            "/delete/FrontPage",
            "/FrontPage",
            "/view/FrontPage/extra",
            "/view/FrontPage\n",
            "",
        ],
    )
    def test__malformed_path__falls_back_to_default_view(self, path: str) -> None:
        """Resolve unmatched paths to the view of the fallback page."""
        assert Router().resolve(path) == Route("view", "TestPage")

    def test__custom_default_title__used_for_fallback(self) -> None:
        router = Router(default_title="Home")

        assert router.default_title == "Home"
        assert router.resolve("/nope") == Route("view", "Home")

    @pytest.mark.parametrize("title", ["Café", "Page²", "bad title", ""])
    def test__unroutable_default_title__raises(self, title: str) -> None:
        """Reject fallback titles the path pattern could never match."""
        with pytest.raises(ValueError, match="Default title is not routable"):
            Router(default_title=title)


class TestRouterIsValidTitle:
    """Tests for Router.is_valid_title()."""

    @pytest.mark.parametrize("title", ["TestPage", "Page2", "a", "123"])
    def test__ascii_alphanumeric__valid(self, title: str) -> None:
        assert Router.is_valid_title(title)

    @pytest.mark.parametrize("title", ["Café", "²", "with space", "dash-ed", ""])
    def test__other_titles__invalid(self, title: str) -> None:
        assert not Router.is_valid_title(title)
