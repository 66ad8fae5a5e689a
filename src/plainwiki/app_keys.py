"""Application keys for type-safe app configuration access."""

from aiohttp import web

from plainwiki.core.renderer import TemplateRenderer
from plainwiki.core.store import PageStore
from plainwiki.core.validator import PathValidator

store_key = web.AppKey("store", PageStore)
renderer_key = web.AppKey("renderer", TemplateRenderer)
validator_key = web.AppKey("validator", PathValidator)
front_page_key = web.AppKey("front_page", str)
