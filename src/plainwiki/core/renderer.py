"""Template rendering for wiki pages.

Templates are Jinja2 files loaded once when the renderer is built; output is
streamed to the client chunk by chunk as the template produces it.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import jinja2
from aiohttp import web

from plainwiki.core.routes import WikiTemplate
from plainwiki.core.types import Page

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Template execution failed."""


class TemplateRenderer:
    """Renders pages with the edit and view templates.

    Both templates are parsed at construction, so a missing or broken template
    file fails application startup instead of a request.
    """

    def __init__(self, templates_dir: Path) -> None:
        """Initialize renderer.

        Args:
            templates_dir: Directory containing edit.html and view.html

        Raises:
            jinja2.TemplateNotFound: If a template file is missing
            jinja2.TemplateSyntaxError: If a template cannot be parsed
        """
        self._templates_dir = templates_dir
        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(templates_dir),
            autoescape=jinja2.select_autoescape(["html"]),
        )
        self._templates = {
            template: self._env.get_template(template.filename)
            for template in WikiTemplate
        }

    @property
    def templates_dir(self) -> Path:
        return self._templates_dir

    def render_chunks(self, template: WikiTemplate, page: Page) -> Iterator[bytes]:
        """Yield encoded output of a template executed against a page.

        Raises:
            RenderError: If template execution fails
        """
        try:
            for chunk in self._templates[template].generate(
                title=page.title,
                body=page.text,
            ):
                yield chunk.encode("utf-8")
        except Exception as e:
            raise RenderError(str(e)) from e

    async def render(
        self,
        request: web.Request,
        template: WikiTemplate,
        page: Page,
    ) -> web.StreamResponse:
        """Stream a rendered template as the response.

        A failure before any output answers 500 with the error text. A failure
        after output started appends the error text to the partial response.

        The body is decoded as UTF-8 before substitution; bytes that are not
        valid UTF-8 are shown as U+FFFD, so the rendered page (and an editor
        form saved from it) does not reproduce them.
        """
        response = web.StreamResponse(
            headers={"Content-Type": "text/html; charset=utf-8"},
        )
        try:
            for chunk in self.render_chunks(template, page):
                if not response.prepared:
                    await response.prepare(request)
                await response.write(chunk)
        except RenderError as e:
            logger.error(f"Failed to render {template.filename} for {page.title}: {e}")
            if not response.prepared:
                return web.Response(status=500, text=f"{e}\n")
            await response.write(f"{e}\n".encode())
            await response.write_eof()
            return response

        if not response.prepared:
            await response.prepare(request)
        await response.write_eof()
        return response
