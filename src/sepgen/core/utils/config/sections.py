"""Configuration section classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class OutputConfig:
    """Where and how provisioning files are written."""

    output_dir: str = "."
    # Escape &, < and > in field values; off reproduces raw legacy output.
    escape_values: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Normalize output settings (warn + default on invalid)."""
        from sepgen.core.utils.logger import log_warning

        output_dir = str(self.output_dir or "").strip()
        if not output_dir:
            log_warning("CONFIG", "Empty output.output_dir, using '.'")
            output_dir = "."
        self.output_dir = output_dir

        if not isinstance(self.escape_values, bool):
            self.escape_values = parse_bool(self.escape_values, default=True)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        from sepgen.core.utils.logger import log_warning

        level = str(self.level).strip().upper()
        if level not in VALID_LOG_LEVELS:
            log_warning("CONFIG", f"Invalid logging.level '{self.level}', using 'WARNING'")
            level = "WARNING"
        self.level = level
        if self.log_file is not None and not str(self.log_file).strip():
            self.log_file = None


def parse_bool(value: object, default: bool) -> bool:
    """Interpret 1/true/yes/on and 0/false/no/off; anything else gives ``default``."""
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    return default
