"""Request path validation.

Accepts only ``/<route>/<title>`` where the route is one of the known
operations and the title is one or more ASCII letters or digits. Titles are
concatenated into storage file names, so nothing else may get through.
"""

import re
from dataclasses import dataclass

from plainwiki.core.routes import WikiRoute
from plainwiki.core.types import PageTitle

_TITLE_PATTERN = "[a-zA-Z0-9]+"
_TITLE_RE = re.compile(f"^{_TITLE_PATTERN}$")


def is_valid_title(title: str) -> bool:
    """Check that a title is safe to use as a storage key."""
    return _TITLE_RE.fullmatch(title) is not None


@dataclass(frozen=True)
class PathMatch:
    """Result of a successful path match."""

    route: WikiRoute
    title: PageTitle


class PathValidator:
    """Compiled matcher for wiki request paths.

    Built once at application startup and shared read-only by every request.
    """

    def __init__(self, routes: tuple[WikiRoute, ...] = tuple(WikiRoute)) -> None:
        names = "|".join(re.escape(route.route_name) for route in routes)
        self._routes = {route.route_name: route for route in routes}
        self._pattern = re.compile(f"^/({names})/({_TITLE_PATTERN})$")

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def match(self, path: str) -> PathMatch | None:
        """Match a request path.

        Args:
            path: Decoded URL path (e.g., "/view/FrontPage")

        Returns:
            PathMatch with the route and extracted title, or None when the
            path is not a wiki path
        """
        # fullmatch: $ alone would accept a trailing newline
        m = self._pattern.fullmatch(path)
        if m is None:
            return None
        return PathMatch(route=self._routes[m.group(1)], title=PageTitle(m.group(2)))
