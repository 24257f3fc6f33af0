"""Top-level sepgen configuration."""

from __future__ import annotations

import json
import os
from pathlib import Path

from dotenv import load_dotenv

from .sections import LoggingConfig, OutputConfig, parse_bool


class SepGenConfig:
    """
    Main configuration class for sepgen.

    Configuration loading order (highest to lowest priority):
    1. Environment variables (``SEPGEN_*``)
    2. Configuration file (if provided)
    3. Default values

    The configuration is organized into sections:
    - output: where provisioning files go and how values are escaped
    - logging: log level and optional log file
    """

    def __init__(self, config_file: str | None = None):
        self.output = OutputConfig()
        self.logging = LoggingConfig()

        # Enable/disable emojis globally in output
        self.use_emojis = True

        if config_file:
            self._load_from_file(config_file)

        self._load_from_env()

    def _load_from_env(self) -> None:
        """
        Load configuration from environment variables.

        Supported environment variables:
        - SEPGEN_OUTPUT_DIR: Directory for SEP<MAC>.cnf.xml files
        - SEPGEN_ESCAPE_XML: Escape XML special characters (1/true/yes/on or 0/false/no/off)
        - SEPGEN_LOG_LEVEL: Logging level
        - SEPGEN_LOG_FILE: Log file path
        - SEPGEN_USE_EMOJIS: Enable/disable emojis
        """
        output_dir = os.getenv("SEPGEN_OUTPUT_DIR")
        if output_dir:
            self.output.output_dir = output_dir

        escape = os.getenv("SEPGEN_ESCAPE_XML")
        if escape:
            self.output.escape_values = parse_bool(escape, self.output.escape_values)

        log_level = os.getenv("SEPGEN_LOG_LEVEL")
        if log_level:
            self.logging.level = log_level
            self.logging.validate()

        log_file = os.getenv("SEPGEN_LOG_FILE")
        if log_file:
            self.logging.log_file = log_file

        use_emojis = os.getenv("SEPGEN_USE_EMOJIS")
        if use_emojis:
            self.use_emojis = parse_bool(use_emojis, self.use_emojis)

    def _load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a JSON file.

        The file may be a plain object or the wrapped form
        ``{"schema_version": N, "config": {...}}``:
            {
                "output": {"output_dir": "...", "escape_values": true},
                "logging": {"level": "INFO", "log_file": null},
                "use_emojis": true
            }

        Raises:
            ValueError: If the file cannot be read or parsed
        """
        if not os.path.exists(config_file):
            return
        try:
            with open(config_file, encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Error loading config file {config_file}: {e}") from e

        if isinstance(config_data, dict) and "schema_version" in config_data:
            config_data = config_data.get("config", {})
        if not isinstance(config_data, dict):
            raise ValueError(f"Config file {config_file} must contain a JSON object")

        for name, target in (("output", self.output), ("logging", self.logging)):
            section = config_data.get(name, {})
            if not isinstance(section, dict):
                raise ValueError(
                    f"Config file {config_file}: '{name}' must be an object, "
                    f"got {type(section).__name__}"
                )
            for key, value in section.items():
                if hasattr(target, key):
                    setattr(target, key, value)
            target.validate()

        if "use_emojis" in config_data:
            self.use_emojis = parse_bool(config_data["use_emojis"], True)


# Global configuration instance
_config: SepGenConfig | None = None
_env_loaded = False


def _load_dotenv() -> None:
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def get_config() -> SepGenConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _load_dotenv()
        _config = SepGenConfig()
    return _config


def set_config(config: SepGenConfig | None) -> None:
    """Set (or clear, with ``None``) the global configuration instance."""
    global _config
    _config = config


def load_config(config_file: str) -> SepGenConfig:
    """Load configuration from file and set as global config."""
    _load_dotenv()
    config = SepGenConfig(config_file)
    set_config(config)
    return config
