"""Tests for CodeVanta configuration."""

from pathlib import Path

import pytest

from codevanta.config import FILE_GLYPHS, LANG_MAP, Config
from codevanta.config.settings import ConsoleConfig, FilesConfig, SidebarConfig
from codevanta.exceptions import ConfigError


class TestLangMap:
    """Tests for language mapping."""

    def test_python_extension(self):
        """Python files should map to python."""
        assert LANG_MAP[".py"] == "python"

    def test_javascript_extensions(self):
        """JavaScript-related files should map to javascript."""
        assert LANG_MAP[".js"] == "javascript"
        assert LANG_MAP[".jsx"] == "javascript"

    def test_typescript_extensions(self):
        """TypeScript files should map to typescript."""
        assert LANG_MAP[".ts"] == "typescript"
        assert LANG_MAP[".tsx"] == "typescript"

    def test_markup_extensions(self):
        """Markup files should map to their own tags."""
        assert LANG_MAP[".html"] == "html"
        assert LANG_MAP[".xml"] == "xml"
        assert LANG_MAP[".md"] == "markdown"


class TestFileGlyphs:
    """Tests for the listing glyph table."""

    def test_keys_have_no_dot(self):
        """Glyphs are keyed by bare lowercase extension."""
        assert all(not key.startswith(".") for key in FILE_GLYPHS)
        assert all(key == key.lower() for key in FILE_GLYPHS)

    def test_known_glyphs(self):
        """Common types have their own glyph."""
        assert FILE_GLYPHS["js"] == "⚡"
        assert FILE_GLYPHS["py"] == "🐍"
        assert FILE_GLYPHS["html"] == "🌐"


class TestConsoleConfig:
    """Tests for ConsoleConfig dataclass."""

    def test_default_values(self):
        """ConsoleConfig should have sensible defaults."""
        config = ConsoleConfig()

        assert config.prompt_directory == "~/codevanta"
        assert config.product_name == "CodeVanta AI Terminal"
        assert config.version == "3.0.0"
        assert config.height == 14
        assert config.show_hints is True
        assert config.preview_char_limit == 500
        assert config.separator_width == 50

    def test_banner(self):
        """banner combines product name and version."""
        config = ConsoleConfig(product_name="Demo", version="1.2")

        assert config.banner == "Demo v1.2"


class TestFilesConfig:
    """Tests for FilesConfig dataclass."""

    def test_default_values(self):
        """FilesConfig should skip the usual build and VCS directories."""
        config = FilesConfig()

        assert config.max_file_size == 1024 * 1024
        assert ".git" in config.ignored_dirs
        assert "node_modules" in config.ignored_dirs

    def test_instances_do_not_share_lists(self):
        """Each instance should own its ignored_dirs list."""
        a = FilesConfig()
        b = FilesConfig()
        a.ignored_dirs.append("extra")

        assert "extra" not in b.ignored_dirs


class TestSidebarConfig:
    """Tests for SidebarConfig dataclass."""

    def test_default_values(self):
        """SidebarConfig should have sensible defaults."""
        config = SidebarConfig()

        assert config.width == 30
        assert config.visible is True


class TestConfigApply:
    """Tests for Config.apply."""

    def test_applies_known_sections(self):
        """Values from each section should land on the matching dataclass."""
        config = Config()
        config.apply(
            {
                "console": {"prompt_directory": "~/work", "height": 20, "show_hints": False},
                "files": {"ignored_dirs": ["out"], "max_file_size": 10},
                "sidebar": {"width": 40, "visible": False},
            }
        )

        assert config.console.prompt_directory == "~/work"
        assert config.console.height == 20
        assert config.console.show_hints is False
        assert config.files.ignored_dirs == ["out"]
        assert config.files.max_file_size == 10
        assert config.sidebar.width == 40
        assert config.sidebar.visible is False

    def test_unknown_keys_are_ignored(self):
        """Unknown sections and keys should leave defaults untouched."""
        config = Config()
        config.apply({"editor": {"theme": "dark"}, "console": {"colour": "red"}})

        assert config.console == ConsoleConfig()

    def test_bad_value_raises_config_error(self):
        """A value of the wrong type should raise ConfigError."""
        config = Config()

        with pytest.raises(ConfigError):
            config.apply({"console": {"height": "tall"}})


class TestConfig:
    """Tests for main Config class."""

    @pytest.fixture(autouse=True)
    def no_user_config(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "CONFIG_DIR", tmp_path / "user")
        monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / "user" / "config.toml")

    def test_load_returns_config(self):
        """Config.load should return a Config instance."""
        config = Config.load()

        assert isinstance(config, Config)
        assert isinstance(config.console, ConsoleConfig)
        assert isinstance(config.files, FilesConfig)
        assert isinstance(config.sidebar, SidebarConfig)

    def test_project_config_is_applied(self, tmp_path):
        """A .codevanta.toml in the project root should be read."""
        (tmp_path / ".codevanta.toml").write_text('[console]\nproduct_name = "Lab"\n')

        config = Config.load(tmp_path)

        assert config.console.product_name == "Lab"

    def test_project_config_overrides_user_config(self, tmp_path):
        """Project settings should win over user settings."""
        Config.CONFIG_DIR.mkdir(parents=True)
        Config.CONFIG_FILE.write_text("[console]\nheight = 10\nseparator_width = 20\n")
        (tmp_path / ".codevanta.toml").write_text("[console]\nheight = 30\n")

        config = Config.load(tmp_path)

        assert config.console.height == 30
        assert config.console.separator_width == 20

    def test_invalid_toml_keeps_defaults(self, tmp_path):
        """A malformed file should be ignored."""
        (tmp_path / ".codevanta.toml").write_text("[console\nheight = ")

        config = Config.load(tmp_path)

        assert config.console.height == 14

    def test_invalid_value_keeps_loading(self, tmp_path):
        """A bad value should be logged, not raised."""
        (tmp_path / ".codevanta.toml").write_text('[sidebar]\nwidth = "wide"\n')

        config = Config.load(tmp_path)

        assert isinstance(config, Config)

    def test_save_round_trips(self):
        """save should write a file that load reads back."""
        config = Config()
        config.console.prompt_directory = "~/saved"
        config.files.ignored_dirs = ["target"]
        config.save()

        loaded = Config.load()

        assert loaded.console.prompt_directory == "~/saved"
        assert loaded.files.ignored_dirs == ["target"]

    def test_config_file_paths(self):
        """Config should define standard config paths."""
        assert Config.CONFIG_FILE.name == "config.toml"
        assert Config.PROJECT_CONFIG_FILE == ".codevanta.toml"
