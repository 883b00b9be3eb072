"""Utils module - Utility functions."""

from pathmatch_core.utils.config import (
    Config,
    load_config,
)
from pathmatch_core.utils.helpers import (
    extract_pathname,
    trim_separators,
)
from pathmatch_core.utils.log import configure_logging

__all__ = [
    "Config",
    "load_config",
    "extract_pathname",
    "trim_separators",
    "configure_logging",
]
