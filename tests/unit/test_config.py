"""Unit tests for the TOML configuration loader."""

import pytest

from emojify.core import config as config_module
from emojify.core.config import ConfigLoader, get_config
from emojify.errors import ConfigError, EmojifyError


def write_config(tmp_path, body):
    path = tmp_path / "config.toml"
    path.write_text(body, encoding="utf-8")
    return path


class TestConfigLoader:
    """Test loading and merging config files."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test that an absent file yields the built-in defaults."""
        loader = ConfigLoader(tmp_path / "nope.toml")
        assert loader.get("options.convert_ascii") is True
        assert loader.cli_format == "text"
        assert loader.log_level == "INFO"
        assert loader.options().output == "emoji"

    def test_file_overrides_defaults(self, tmp_path):
        """Test that values in [emojify] are merged over the defaults."""
        path = write_config(
            tmp_path,
            """
[emojify.options]
convertAscii = false
output = "unicode"

[emojify.cli]
format = "json"

[emojify.logging]
level = "debug"
""",
        )
        loader = ConfigLoader(path)

        options = loader.options()
        assert options.convert_ascii is False
        assert options.convert_shortnames is True
        assert options.wants_unicode
        assert loader.cli_format == "json"
        assert loader.log_level == "DEBUG"

    def test_get_with_default(self, tmp_path):
        """Test dot-path lookups."""
        loader = ConfigLoader(tmp_path / "nope.toml")
        assert loader.get("options.output") == "emoji"
        assert loader.get("options.missing", "fallback") == "fallback"
        assert loader.get("nope.deeper") is None

    def test_other_sections_ignored(self, tmp_path):
        """Only the [emojify] table is read."""
        path = write_config(tmp_path, '[other]\nformat = "html"\n')
        assert ConfigLoader(path).cli_format == "text"


class TestConfigErrors:
    """Test that invalid configuration raises ConfigError."""

    def test_malformed_toml(self, tmp_path):
        path = write_config(tmp_path, "[emojify\nbroken")
        with pytest.raises(ConfigError, match="Cannot read config file"):
            ConfigLoader(path)

    def test_section_must_be_table(self, tmp_path):
        path = write_config(tmp_path, 'emojify = "yes"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            ConfigLoader(path)

    def test_invalid_format(self, tmp_path):
        path = write_config(tmp_path, '[emojify.cli]\nformat = "xml"\n')
        with pytest.raises(ConfigError, match="cli.format"):
            ConfigLoader(path).cli_format

    def test_invalid_log_level(self, tmp_path):
        path = write_config(tmp_path, '[emojify.logging]\nlevel = "loud"\n')
        with pytest.raises(ConfigError, match="logging.level"):
            ConfigLoader(path).log_level

    def test_options_must_be_table(self, tmp_path):
        path = write_config(tmp_path, '[emojify]\noptions = "all"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            ConfigLoader(path).options()

    def test_odd_option_values_are_coerced(self, tmp_path):
        """Option values degrade like the API does instead of failing."""
        path = write_config(tmp_path, '[emojify.options]\nconvert_ascii = 0\noutput = "svg"\n')
        options = ConfigLoader(path).options()
        assert options.convert_ascii is False
        assert options.output == "emoji"

    def test_config_error_is_emojify_error(self):
        assert issubclass(ConfigError, EmojifyError)


class TestGlobalConfig:
    """Test the process-wide loader."""

    def test_env_var_selects_file(self, tmp_path, monkeypatch):
        """EMOJIFY_CONFIG points the default loader at a file."""
        path = write_config(tmp_path, '[emojify.cli]\nformat = "html"\n')
        monkeypatch.setenv("EMOJIFY_CONFIG", str(path))
        monkeypatch.setattr(config_module, "_config_loader", None)

        loader = get_config()
        assert loader.config_file == str(path)
        assert loader.cli_format == "html"
        assert get_config() is loader
