#!/usr/bin/env python3
"""Configuration loader that reads from config files."""
import copy
import os
from pathlib import Path
from typing import Any

import tomllib

from ..errors import ConfigError
from ..options import EmojifyOptions

DEFAULT_CONFIG: dict[str, Any] = {
    "options": {
        "convert_shortnames": True,
        "convert_unicode": True,
        "convert_ascii": True,
        "output": "emoji",
    },
    "cli": {"format": "text"},
    "logging": {"level": "INFO"},
}

CLI_FORMATS = ("text", "html", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    full_config = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
            emojify_config = full_config.get("emojify", {})
        else:
            emojify_config = {}

        if not isinstance(emojify_config, dict):
            raise ConfigError(f"[emojify] in {config_path} must be a table")

        self._config = self._merge_dicts(DEFAULT_CONFIG, emojify_config)

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("EMOJIFY_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".emojify" / "config.toml"

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = copy.deepcopy(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'options.convert_ascii')"""
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def options(self) -> EmojifyOptions:
        """Conversion options from the ``[emojify.options]`` table."""
        values = self.get("options", {})
        if not isinstance(values, dict):
            raise ConfigError(f"[emojify.options] in {self.config_file} must be a table")
        return EmojifyOptions.merge(values)

    @property
    def cli_format(self) -> str:
        fmt = str(self.get("cli.format", "text"))
        if fmt not in CLI_FORMATS:
            raise ConfigError(f"cli.format must be one of {', '.join(CLI_FORMATS)}, got {fmt!r}")
        return fmt

    @property
    def log_level(self) -> str:
        level = str(self.get("logging.level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
        return level


# Global singleton instance
_config_loader: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Get the global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader
