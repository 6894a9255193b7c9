"""Application keys for type-safe app configuration access."""

import jinja2
from aiohttp import web

from tinywiki.core.router import Router
from tinywiki.store.base import PageStore

store_key = web.AppKey("store", PageStore)
templates_key = web.AppKey("templates", jinja2.Environment)
router_key = web.AppKey("router", Router)
