"""Asset discovery for bundled page templates.

Locates the default edit/view templates shipped inside the plainwiki package.
"""

from importlib.resources import files
from pathlib import Path


def get_templates_dir() -> Path:
    """Return path to bundled templates.

    Returns:
        Path to the directory containing edit.html and view.html.

    Raises:
        FileNotFoundError: If templates are not bundled.
    """
    templates = files("plainwiki").joinpath("templates")
    if not templates.is_dir():
        msg = (
            "Bundled templates not found. "
            "Reinstall plainwiki or set wiki.templates_dir in plainwiki.toml."
        )
        raise FileNotFoundError(msg)
    return Path(str(templates))
