from .main import (
    SepGenConfig,
    get_config,
    load_config,
    set_config,
)
from .sections import LoggingConfig, OutputConfig, parse_bool

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "SepGenConfig",
    "get_config",
    "load_config",
    "parse_bool",
    "set_config",
]
