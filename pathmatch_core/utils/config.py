"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

from pathmatch_core.utils.helpers import PROTOCOLS
from pathmatch_core.utils.log import configure_logging

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class Config:
    """Path matching configuration."""

    # Matching
    parameter_identifier: str = ":"

    # URL resolution
    protocol: str = "http"
    host: str = "localhost"

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ValueError(f"{f.name} must be a string, got {value!r}")

        if not self.parameter_identifier:
            raise ValueError("parameter_identifier must be a non-empty string")
        if self.protocol not in PROTOCOLS:
            raise ValueError(f"Unsupported protocol: {self.protocol!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"Unknown log format: {self.log_format!r}")

    def apply_logging(self, logger_name: Optional[str] = None) -> logging.Logger:
        """Configure logging from log_level and log_format."""
        return configure_logging(self.log_level, self.log_format, logger_name)

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @staticmethod
    def env_values(prefix: str = "PATHMATCH_") -> Dict[str, str]:
        """Collect config values set in the environment."""
        data = {}
        for key, value in os.environ.items():
            if key.startswith(prefix):
                data[key[len(prefix):].lower()] = value
        return data

    @classmethod
    def from_env(cls: Type[T], prefix: str = "PATHMATCH_") -> T:
        """Load config from environment variables."""
        return cls.from_dict(cls.env_values(prefix))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def merge(self, overrides: Dict[str, Any]) -> "Config":
        """Return a copy with the given values taking precedence."""
        data = self.to_dict()
        data.update(overrides)
        return type(self).from_dict(data)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "PATHMATCH_",
) -> Config:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = Config()

    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path_obj.suffix == ".json":
                config = Config.from_json(path)
            elif path_obj.suffix in (".yaml", ".yml"):
                config = Config.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Only variables actually set override the file
    return config.merge(Config.env_values(env_prefix))


__all__ = [
    "Config",
    "load_config",
]
