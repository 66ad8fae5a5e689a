"""Shared test fixtures."""

from pathlib import Path
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient

from plainwiki.config import Config, ServerConfig, WikiConfig
from plainwiki.server import create_app


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """Directory for page files (not created; the store creates it on save)."""
    return tmp_path / "pages"


@pytest.fixture
def test_config(pages_dir: Path) -> Config:
    """Create a test configuration over tmp_path with bundled templates."""
    return Config(
        server=ServerConfig(),
        wiki=WikiConfig(pages_dir=pages_dir),
    )


@pytest.fixture
def app(test_config: Config) -> web.Application:
    return create_app(test_config)


@pytest.fixture
async def client(aiohttp_client: Any, app: web.Application) -> TestClient:
    """Create test client for the configured app."""
    return await aiohttp_client(app)


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Create a directory with minimal edit/view templates."""
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "edit.html").write_text("EDIT {{ title }}: [{{ body }}]")
    (templates / "view.html").write_text("VIEW {{ title }}: [{{ body }}]")
    return templates
