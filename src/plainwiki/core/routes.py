"""Route and template tables.

The set of operations and renderable views is closed; every URL and template
file name is derived from these enums rather than spelled out at call sites.
"""

from enum import Enum


class WikiRoute(Enum):
    """Wiki operations, each served under its own URL prefix."""

    EDIT = "edit"
    VIEW = "view"
    SAVE = "save"

    @property
    def route_name(self) -> str:
        return self.value

    @property
    def pattern(self) -> str:
        """Registration prefix, e.g. ``/view/``."""
        return f"/{self.value}/"

    def path(self, title: str) -> str:
        """Build the URL path of this route for a page title."""
        return f"/{self.value}/{title}"


class WikiTemplate(Enum):
    """Renderable views, each bound to one template file."""

    EDIT = "edit.html"
    VIEW = "view.html"

    @property
    def filename(self) -> str:
        return self.value
