"""File-backed page storage.

Storage structure:
    pages/
    ├── FrontPage.txt        # Raw body bytes, no header or metadata
    └── Welcome.txt

The title is the storage key: each page lives at ``<pages_dir>/<title><ext>``.
There is no locking; concurrent saves of the same title race and the last
write wins.
"""

import logging
import os
from pathlib import Path

from plainwiki.core.types import Page
from plainwiki.core.validator import is_valid_title

logger = logging.getLogger(__name__)

PAGE_FILE_MODE = 0o600


class StorageError(Exception):
    """Page could not be read or written."""


class PageNotFoundError(StorageError):
    """No stored page exists for the title."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageStore:
    """Loads and saves pages as plain files in a single directory."""

    def __init__(self, pages_dir: Path, *, extension: str = ".txt") -> None:
        """Initialize store.

        Args:
            pages_dir: Directory holding page files (created on first save)
            extension: File extension appended to each title
        """
        self._pages_dir = pages_dir
        self._extension = extension

    @property
    def pages_dir(self) -> Path:
        return self._pages_dir

    @property
    def extension(self) -> str:
        return self._extension

    def path_for(self, title: str) -> Path:
        """Resolve a title to its storage file."""
        return self._pages_dir / f"{title}{self._extension}"

    def load(self, title: str) -> Page:
        """Read a page.

        Args:
            title: Page title

        Returns:
            Page with the file's full content as body

        Raises:
            PageNotFoundError: If no file exists for the title
            StorageError: If the file exists but cannot be read
        """
        if not is_valid_title(title):
            raise PageNotFoundError(title)

        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError as e:
            raise PageNotFoundError(title) from e
        except OSError as e:
            logger.warning(f"Could not read page {title} from {path}: {e}")
            raise StorageError(str(e)) from e

        logger.debug(f"Loaded page {title} ({len(body)} bytes)")
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Write a page, replacing any previous content.

        Args:
            page: Page to persist

        Raises:
            StorageError: If the file cannot be written
        """
        if not is_valid_title(page.title):
            raise StorageError(f"Invalid page title: {page.title!r}")

        path = self.path_for(page.title)
        try:
            self._pages_dir.mkdir(parents=True, exist_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PAGE_FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            logger.error(f"Could not save page {page.title} to {path}: {e}")
            raise StorageError(str(e)) from e

        logger.info(f"Saved page {page.title} ({len(page.body)} bytes)")
