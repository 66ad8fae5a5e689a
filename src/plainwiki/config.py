"""Configuration management for plainwiki.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from plainwiki.core.validator import is_valid_title

CONFIG_FILENAME = "plainwiki.toml"
DEFAULT_CLIENT_MAX_SIZE = 10 * 1024 * 1024


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080
    # Largest accepted request body; form posts carry the whole page
    client_max_size: int = DEFAULT_CLIENT_MAX_SIZE


@dataclass
class WikiConfig:
    """Wiki storage and presentation configuration."""

    pages_dir: Path = field(default_factory=lambda: Path("pages"))
    templates_dir: Path | None = None
    extension: str = ".txt"
    front_page: str = "FrontPage"


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    wiki: WikiConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for plainwiki.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(server=ServerConfig(), wiki=WikiConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            wiki=cls._parse_wiki(data.get("wiki"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        client_max_size = data.get("client_max_size", DEFAULT_CLIENT_MAX_SIZE)
        if (
            not isinstance(client_max_size, int)
            or isinstance(client_max_size, bool)
            or client_max_size <= 0
        ):
            raise ValueError("server.client_max_size must be a positive integer")

        return ServerConfig(host=host, port=port, client_max_size=client_max_size)

    @classmethod
    def _parse_wiki(cls, data: object, config_dir: Path) -> WikiConfig:
        """Parse wiki configuration section.

        Args:
            data: Raw wiki section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            WikiConfig instance
        """
        if data is None:
            return WikiConfig(pages_dir=config_dir / "pages")

        if not isinstance(data, dict):
            raise ValueError("wiki section must be a dictionary")

        pages_dir = data.get("pages_dir", "pages")
        if not isinstance(pages_dir, str):
            raise ValueError("wiki.pages_dir must be a string")

        templates_dir = data.get("templates_dir")
        if templates_dir is not None and not isinstance(templates_dir, str):
            raise ValueError("wiki.templates_dir must be a string")

        extension = data.get("extension", ".txt")
        if not isinstance(extension, str):
            raise ValueError("wiki.extension must be a string")
        if not extension.startswith(".") or "/" in extension:
            raise ValueError("wiki.extension must start with '.' and contain no '/'")

        front_page = data.get("front_page", "FrontPage")
        if not isinstance(front_page, str) or not is_valid_title(front_page):
            raise ValueError("wiki.front_page must be letters and digits only")

        return WikiConfig(
            pages_dir=config_dir / pages_dir,
            templates_dir=config_dir / templates_dir if templates_dir else None,
            extension=extension,
            front_page=front_page,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        pages_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original Config
        is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            pages_dir: Override wiki.pages_dir
            templates_dir: Override wiki.templates_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        wiki = self.wiki
        if pages_dir is not None or templates_dir is not None:
            wiki = replace(
                self.wiki,
                pages_dir=pages_dir if pages_dir is not None else self.wiki.pages_dir,
                templates_dir=(
                    templates_dir if templates_dir is not None else self.wiki.templates_dir
                ),
            )

        return replace(self, server=server, wiki=wiki)
