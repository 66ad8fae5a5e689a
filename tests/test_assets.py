"""Tests for bundled template discovery."""

from plainwiki.assets import get_templates_dir
from plainwiki.core.routes import WikiTemplate


class TestGetTemplatesDir:
    """Tests for get_templates_dir()."""

    def test__returns_existing_directory(self) -> None:
        assert get_templates_dir().is_dir()

    def test__contains_every_template(self) -> None:
        templates_dir = get_templates_dir()

        for template in WikiTemplate:
            assert (templates_dir / template.filename).is_file()
