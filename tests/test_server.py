"""Tests for server module."""

from pathlib import Path

import jinja2
import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient

from plainwiki.app_keys import front_page_key, renderer_key, store_key, validator_key
from plainwiki.assets import get_templates_dir
from plainwiki.config import Config, ServerConfig, WikiConfig
from plainwiki.server import create_app


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        """Create app with collaborators built from configuration."""
        app = create_app(test_config)

        assert store_key in app
        assert renderer_key in app
        assert validator_key in app
        assert app[store_key].pages_dir == test_config.wiki.pages_dir
        assert app[store_key].extension == ".txt"
        assert app[front_page_key] == "FrontPage"

    def test__default_templates__uses_bundled(self, test_config: Config) -> None:
        app = create_app(test_config)

        assert app[renderer_key].templates_dir == get_templates_dir()

    def test__templates_dir__overrides_bundled(self, pages_dir: Path, templates_dir: Path) -> None:
        config = Config(
            server=ServerConfig(),
            wiki=WikiConfig(pages_dir=pages_dir, templates_dir=templates_dir),
        )

        app = create_app(config)

        assert app[renderer_key].templates_dir == templates_dir

    def test__missing_templates__fails_startup(self, pages_dir: Path, tmp_path: Path) -> None:
        config = Config(
            server=ServerConfig(),
            wiki=WikiConfig(pages_dir=pages_dir, templates_dir=tmp_path / "nowhere"),
        )

        with pytest.raises(jinja2.TemplateNotFound):
            create_app(config)

    def test__routes__registered_by_name(self, test_config: Config) -> None:
        app = create_app(test_config)

        assert {"view", "edit", "save"} <= set(app.router.named_resources())


class TestFrontPage:
    """Tests for the site root."""

    @pytest.mark.asyncio
    async def test__root__redirects_to_front_page(self, client: TestClient) -> None:
        response = await client.get("/", allow_redirects=False)

        assert response.status == 302
        assert response.headers["Location"] == "/view/FrontPage"

    @pytest.mark.asyncio
    async def test__custom_front_page__used(self, aiohttp_client, pages_dir: Path) -> None:
        config = Config(
            server=ServerConfig(),
            wiki=WikiConfig(pages_dir=pages_dir, front_page="Home"),
        )
        client = await aiohttp_client(create_app(config))

        response = await client.get("/", allow_redirects=False)

        assert response.headers["Location"] == "/view/Home"


class TestCustomTemplates:
    """Tests for serving with user-provided templates."""

    @pytest.fixture
    def app(self, pages_dir: Path, templates_dir: Path) -> web.Application:
        return create_app(
            Config(
                server=ServerConfig(),
                wiki=WikiConfig(pages_dir=pages_dir, templates_dir=templates_dir, extension=".md"),
            ),
        )

    @pytest.mark.asyncio
    async def test__edit__uses_custom_template(self, client: TestClient) -> None:
        response = await client.get("/edit/Notes")

        assert await response.text() == "EDIT Notes: []"

    @pytest.mark.asyncio
    async def test__save__uses_configured_extension(
        self, pages_dir: Path, client: TestClient
    ) -> None:
        await client.post("/save/Notes", data={"body": "n"}, allow_redirects=False)

        assert (pages_dir / "Notes.md").read_bytes() == b"n"
        response = await client.get("/view/Notes")
        assert await response.text() == "VIEW Notes: [n]"


class TestRequestSizeLimit:
    """Tests for server.client_max_size."""

    @pytest.mark.asyncio
    async def test__body_over_limit__rejected(self, aiohttp_client, pages_dir: Path) -> None:
        config = Config(
            server=ServerConfig(client_max_size=1024),
            wiki=WikiConfig(pages_dir=pages_dir),
        )
        client = await aiohttp_client(create_app(config))

        response = await client.post(
            "/save/Big", data={"body": "a" * 2048}, allow_redirects=False
        )

        assert response.status == 413
        assert not (pages_dir / "Big.txt").exists()

    def test__default_limit__ten_mebibytes(self) -> None:
        assert ServerConfig().client_max_size == 10 * 1024 * 1024
