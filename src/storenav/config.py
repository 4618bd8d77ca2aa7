"""Configuration management for Storenav.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from storenav.core.navigation import FooterConfig, HeaderConfig, NavigationConfig

CONFIG_FILENAME = "storenav.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class StoreConfig:
    """Page store configuration."""

    pages_file: Path = field(default_factory=lambda: Path("pages.json"))


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    store: StoreConfig
    navigation: NavigationConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for storenav.toml in current directory and parents.

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
    def _default(cls) -> Config:
        return cls(
            server=ServerConfig(),
            store=StoreConfig(),
            navigation=NavigationConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        navigation_data = data.get("navigation")
        if navigation_data is not None and not isinstance(navigation_data, dict):
            raise ValueError("navigation section must be a dictionary")
        navigation_data = navigation_data or {}

        return cls(
            server=cls._parse_server(data.get("server")),
            store=cls._parse_store(data.get("store"), config_dir),
            navigation=NavigationConfig(
                header=cls._parse_header(navigation_data.get("header")),
                footer=cls._parse_footer(navigation_data.get("footer")),
            ),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
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

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_store(cls, data: object, config_dir: Path) -> StoreConfig:
        """Parse store configuration section.

        Args:
            data: Raw store section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            StoreConfig instance
        """
        if data is None:
            return StoreConfig(pages_file=config_dir / "pages.json")

        if not isinstance(data, dict):
            raise ValueError("store section must be a dictionary")

        pages_file = data.get("pages_file", "pages.json")
        if not isinstance(pages_file, str):
            raise ValueError("store.pages_file must be a string")

        return StoreConfig(pages_file=config_dir / pages_file)

    @classmethod
    def _parse_header(cls, data: object) -> HeaderConfig:
        """Parse navigation.header configuration section."""
        if data is None:
            return HeaderConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation.header section must be a dictionary")

        max_items = data.get("max_items", 7)
        if not isinstance(max_items, int) or isinstance(max_items, bool):
            raise ValueError("navigation.header.max_items must be an integer")
        if max_items < 0:
            raise ValueError("navigation.header.max_items must not be negative")

        show_dropdowns = data.get("show_dropdowns", True)
        if not isinstance(show_dropdowns, bool):
            raise ValueError("navigation.header.show_dropdowns must be a boolean")

        mobile_collapse = data.get("mobile_collapse", True)
        if not isinstance(mobile_collapse, bool):
            raise ValueError("navigation.header.mobile_collapse must be a boolean")

        return HeaderConfig(
            max_items=max_items,
            show_dropdowns=show_dropdowns,
            mobile_collapse=mobile_collapse,
        )

    @classmethod
    def _parse_footer(cls, data: object) -> FooterConfig:
        """Parse navigation.footer configuration section."""
        if data is None:
            return FooterConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation.footer section must be a dictionary")

        columns = data.get("columns", 4)
        if not isinstance(columns, int) or isinstance(columns, bool):
            raise ValueError("navigation.footer.columns must be an integer")
        if not 1 <= columns <= 4:
            raise ValueError("navigation.footer.columns must be between 1 and 4")

        show_social_links = data.get("show_social_links", True)
        if not isinstance(show_social_links, bool):
            raise ValueError("navigation.footer.show_social_links must be a boolean")

        show_copyright = data.get("show_copyright", True)
        if not isinstance(show_copyright, bool):
            raise ValueError("navigation.footer.show_copyright must be a boolean")

        return FooterConfig(
            columns=columns,
            show_social_links=show_social_links,
            show_copyright=show_copyright,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        pages_file: Path | None = None,
        max_items: int | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            pages_file: Override store.pages_file
            max_items: Override navigation.header.max_items

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

        store = self.store
        if pages_file is not None:
            store = replace(self.store, pages_file=pages_file)

        navigation = self.navigation
        if max_items is not None:
            navigation = replace(
                self.navigation,
                header=replace(self.navigation.header, max_items=max_items),
            )

        return replace(self, server=server, store=store, navigation=navigation)
