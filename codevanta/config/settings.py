"""Configuration settings for CodeVanta."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..exceptions import ConfigError
from .defaults import (
    DEFAULT_IGNORED_DIRS,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_PRODUCT_NAME,
    DEFAULT_PROMPT_DIRECTORY,
    DEFAULT_VERSION,
)

logger = logging.getLogger(__name__)


@dataclass
class ConsoleConfig:
    """Console-related settings."""

    prompt_directory: str = DEFAULT_PROMPT_DIRECTORY
    product_name: str = DEFAULT_PRODUCT_NAME
    version: str = DEFAULT_VERSION
    height: int = 14
    show_hints: bool = True
    preview_char_limit: int = 500
    separator_width: int = 50

    @property
    def banner(self) -> str:
        return f"{self.product_name} v{self.version}"


@dataclass
class FilesConfig:
    """Project file scanning settings."""

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    ignored_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_DIRS))


@dataclass
class SidebarConfig:
    """Sidebar-related settings."""

    width: int = 30
    visible: bool = True


@dataclass
class Config:
    """Main configuration class for CodeVanta."""

    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    files: FilesConfig = field(default_factory=FilesConfig)
    sidebar: SidebarConfig = field(default_factory=SidebarConfig)

    # XDG config directory
    CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME") or (Path.home() / ".config")) / "codevanta"
    CONFIG_FILE = CONFIG_DIR / "config.toml"
    PROJECT_CONFIG_FILE = ".codevanta.toml"

    @classmethod
    def load(cls, project_path: Optional[Path] = None) -> "Config":
        """Load configuration from files.

        Priority (highest to lowest):
        1. Project-specific config (.codevanta.toml in project root)
        2. User config (~/.config/codevanta/config.toml)
        3. Default values
        """
        config = cls()

        if cls.CONFIG_FILE.exists():
            config._load_from_file(cls.CONFIG_FILE)

        # Project config overrides user config
        if project_path:
            project_config = project_path / cls.PROJECT_CONFIG_FILE
            if project_config.exists():
                config._load_from_file(project_config)

        return config

    def _load_from_file(self, path: Path) -> None:
        """Load configuration from a TOML file.

        Args:
            path: Path to the TOML configuration file.

        Note:
            Invalid configurations are logged but don't raise exceptions.
            The application continues with the values loaded so far.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return
        except tomllib.TOMLDecodeError as e:
            logger.warning("Invalid TOML in %s: %s", path, e)
            return
        except OSError as e:
            logger.warning("Cannot read config file %s: %s", path, e)
            return

        try:
            self.apply(data)
        except ConfigError as e:
            logger.warning("Invalid configuration in %s: %s", path, e)

    def apply(self, data: dict) -> None:
        """Apply a parsed TOML document on top of the current values.

        Raises:
            ConfigError: If a value cannot be converted to the field's type.
        """
        try:
            if "console" in data:
                console_data = data["console"]
                for key in ("prompt_directory", "product_name", "version"):
                    if key in console_data:
                        setattr(self.console, key, str(console_data[key]))
                for key in ("height", "preview_char_limit", "separator_width"):
                    if key in console_data:
                        setattr(self.console, key, int(console_data[key]))
                if "show_hints" in console_data:
                    self.console.show_hints = bool(console_data["show_hints"])

            if "files" in data:
                files_data = data["files"]
                if "max_file_size" in files_data:
                    self.files.max_file_size = int(files_data["max_file_size"])
                if "ignored_dirs" in files_data:
                    self.files.ignored_dirs = [str(d) for d in files_data["ignored_dirs"]]

            if "sidebar" in data:
                sidebar_data = data["sidebar"]
                if "width" in sidebar_data:
                    self.sidebar.width = int(sidebar_data["width"])
                if "visible" in sidebar_data:
                    self.sidebar.visible = bool(sidebar_data["visible"])
        except (TypeError, ValueError) as e:
            raise ConfigError(str(e)) from e

    def save(self) -> None:
        """Save configuration to user config file."""
        ignored = ", ".join(f'"{d}"' for d in self.files.ignored_dirs)
        content = f"""# CodeVanta Configuration

[console]
prompt_directory = "{self.console.prompt_directory}"
product_name = "{self.console.product_name}"
version = "{self.console.version}"
height = {self.console.height}
show_hints = {str(self.console.show_hints).lower()}
preview_char_limit = {self.console.preview_char_limit}
separator_width = {self.console.separator_width}

[files]
max_file_size = {self.files.max_file_size}
ignored_dirs = [{ignored}]

[sidebar]
width = {self.sidebar.width}
visible = {str(self.sidebar.visible).lower()}
"""
        try:
            self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
            with open(self.CONFIG_FILE, "w") as f:
                f.write(content)
        except OSError as e:
            raise ConfigError(f"Cannot write {self.CONFIG_FILE}: {e}") from e
