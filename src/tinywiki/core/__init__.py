"""Core wiki logic: pages, link rewriting and path routing."""

from tinywiki.core.links import rewrite_links
from tinywiki.core.page import Page
from tinywiki.core.router import Route, Router

__all__ = ["Page", "Route", "Router", "rewrite_links"]
