"""Core type definitions."""

from dataclasses import dataclass
from typing import NewType

# Page title that passed path validation (e.g., "FrontPage")
# Distinct from plain str to catch unvalidated titles reaching the store
PageTitle = NewType("PageTitle", str)


@dataclass(frozen=True)
class Page:
    """A wiki page: its title and raw body bytes."""

    title: str
    body: bytes = b""

    @classmethod
    def empty(cls, title: str) -> "Page":
        return cls(title=title)

    @property
    def text(self) -> str:
        """Body decoded for template substitution."""
        return self.body.decode("utf-8", errors="replace")
