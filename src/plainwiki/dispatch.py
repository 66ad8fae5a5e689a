"""Path-validating dispatch to title handlers."""

import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from plainwiki.core.types import PageTitle
from plainwiki.core.validator import PathValidator

logger = logging.getLogger(__name__)

TitleHandler = Callable[[web.Request, PageTitle], Awaitable[web.StreamResponse]]


class Dispatcher:
    """Adapts a title handler into an aiohttp request handler.

    Each request path is validated first; paths that are not well-formed wiki
    paths get a 404 and the wrapped handler never runs. The dispatcher keeps no
    per-request state, so one instance serves any number of concurrent requests.
    """

    def __init__(self, validator: PathValidator, handler: TitleHandler) -> None:
        self._validator = validator
        self._handler = handler

    async def handle(self, request: web.Request) -> web.StreamResponse:
        match = self._validator.match(request.path)
        if match is None:
            raise web.HTTPNotFound()
        logger.debug(f"{request.method} {match.route.route_name} {match.title}")
        return await self._handler(request, match.title)
