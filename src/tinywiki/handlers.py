"""Wiki request handlers.

Every request goes through a single catch-all route. The router turns the
path into an action and a title, and the matching handler reads from or
writes to the page store.
"""

import logging
from collections.abc import Awaitable, Callable

import jinja2
from aiohttp import web

from tinywiki.app_keys import router_key, store_key, templates_key
from tinywiki.core.links import rewrite_links
from tinywiki.core.page import Page
from tinywiki.store.base import StoreError

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request, str], Awaitable[web.StreamResponse]]


def create_wiki_routes() -> list[web.RouteDef]:
    return [
        web.route("*", "/{path:.*}", dispatch),
    ]


async def dispatch(request: web.Request) -> web.StreamResponse:
    """Route a request to the view, edit or save handler."""
    route = request.app[router_key].resolve(request.path)
    logger.debug(f"{request.method} {request.path} -> {route.action} {route.title}")
    handler = HANDLERS[route.action]
    return await handler(request, route.title)


async def view_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except StoreError as e:
        logger.debug(f"Cannot load {title} ({e}), redirecting to editor")
        raise web.HTTPFound(f"/edit/{title}") from e

    page.body = rewrite_links(page.body)
    return _render(request, "view.html", page)


async def edit_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except StoreError:
        page = Page(title=title)
    return _render(request, "edit.html", page)


async def save_page(request: web.Request, title: str) -> web.StreamResponse:
    body = await _form_value(request, "body")
    page = Page(title=title, body=body.encode("utf-8"))

    store = request.app[store_key]
    try:
        store.save(page)
    except StoreError as e:
        logger.error(f"Failed to save {title}: {e}")
        return web.Response(status=500, text=str(e))

    logger.info(f"Saved page {title}")
    raise web.HTTPFound(f"/view/{title}")


HANDLERS: dict[str, Handler] = {
    "view": view_page,
    "edit": edit_page,
    "save": save_page,
}


async def _form_value(request: web.Request, name: str) -> str:
    """Return a form field from the request body, falling back to the query string."""
    form = await request.post()
    value = form.get(name)
    if value is None:
        value = request.query.get(name, "")
    return value if isinstance(value, str) else ""


def _render(request: web.Request, template_name: str, page: Page) -> web.Response:
    env = request.app[templates_key]
    try:
        html = env.get_template(template_name).render(page=page)
    except jinja2.TemplateError as e:
        logger.error(f"Failed to render {template_name} for {page.title}: {e}")
        return web.Response(status=500, text=str(e))
    return web.Response(text=html, content_type="text/html")
