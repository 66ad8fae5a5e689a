"""aiohttp server for plainwiki.

Application factory and route registration.
"""

import logging

from aiohttp import web

from plainwiki.api.pages import create_wiki_routes
from plainwiki.app_keys import front_page_key, renderer_key, store_key, validator_key
from plainwiki.assets import get_templates_dir
from plainwiki.config import Config
from plainwiki.core.renderer import TemplateRenderer
from plainwiki.core.routes import WikiRoute
from plainwiki.core.store import PageStore
from plainwiki.core.validator import PathValidator

logger = logging.getLogger(__name__)


async def front_page(request: web.Request) -> web.StreamResponse:
    """Redirect the site root to the front page."""
    raise web.HTTPFound(WikiRoute.VIEW.path(request.app[front_page_key]))


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Store, renderer and validator are built here, before the server accepts
    requests, and are read-only afterwards.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application(client_max_size=config.server.client_max_size)

    templates_dir = config.wiki.templates_dir or get_templates_dir()

    app[store_key] = PageStore(config.wiki.pages_dir, extension=config.wiki.extension)
    app[renderer_key] = TemplateRenderer(templates_dir)
    app[validator_key] = PathValidator()
    app[front_page_key] = config.wiki.front_page

    app.router.add_routes(create_wiki_routes(app[validator_key]))
    app.router.add_get("/", front_page)

    logger.debug(f"Serving pages from {config.wiki.pages_dir} with templates from {templates_dir}")
    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
