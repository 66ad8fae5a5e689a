"""Wiki page endpoints.

Handles viewing, editing and saving pages. Each handler receives a title that
already passed path validation.
"""

import asyncio
import logging

from aiohttp import web

from plainwiki.app_keys import renderer_key, store_key
from plainwiki.core.routes import WikiRoute, WikiTemplate
from plainwiki.core.store import PageNotFoundError, StorageError
from plainwiki.core.types import Page, PageTitle
from plainwiki.core.validator import PathValidator
from plainwiki.dispatch import Dispatcher, TitleHandler

logger = logging.getLogger(__name__)


def create_wiki_routes(validator: PathValidator) -> list[web.RouteDef]:
    """Build one route per wiki operation, each behind path validation.

    Routes accept any HTTP method; saving through GET is processed like POST.
    """
    handlers: dict[WikiRoute, TitleHandler] = {
        WikiRoute.VIEW: view_page,
        WikiRoute.EDIT: edit_page,
        WikiRoute.SAVE: save_page,
    }
    return [
        web.route(
            "*",
            f"{route.pattern}{{title:.*}}",
            Dispatcher(validator, handlers[route]).handle,
            name=route.route_name,
        )
        for route in WikiRoute
    ]


async def view_page(request: web.Request, title: PageTitle) -> web.StreamResponse:
    store = request.app[store_key]

    try:
        page = await asyncio.to_thread(store.load, title)
    except PageNotFoundError:
        logger.debug(f"Page {title} not found, redirecting to editor")
        raise web.HTTPFound(WikiRoute.EDIT.path(title)) from None
    except StorageError as e:
        return _storage_error(e)

    return await request.app[renderer_key].render(request, WikiTemplate.VIEW, page)


async def edit_page(request: web.Request, title: PageTitle) -> web.StreamResponse:
    store = request.app[store_key]

    try:
        page = await asyncio.to_thread(store.load, title)
    except PageNotFoundError:
        page = Page.empty(title)
    except StorageError as e:
        return _storage_error(e)

    return await request.app[renderer_key].render(request, WikiTemplate.EDIT, page)


async def save_page(request: web.Request, title: PageTitle) -> web.StreamResponse:
    store = request.app[store_key]

    page = Page(title=title, body=await _read_body_field(request))
    try:
        await asyncio.to_thread(store.save, page)
    except StorageError as e:
        return _storage_error(e)

    raise web.HTTPFound(WikiRoute.VIEW.path(title))


def _storage_error(error: StorageError) -> web.Response:
    return web.Response(status=500, text=f"{error}\n")


async def _read_body_field(request: web.Request) -> bytes:
    """Read the submitted ``body`` field; form data wins over the query string.

    Multipart file parts named ``body`` are not values and are ignored.
    """
    form = await request.post()
    for value in form.getall("body", []):
        if isinstance(value, str):
            return value.encode("utf-8")
    return request.query.get("body", "").encode("utf-8")
