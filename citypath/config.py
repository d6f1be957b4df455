"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the file locations,
delimiters and logging settings used by the route planner.

Configuration can be overridden via environment variables:
- CITYPATH_GRAPH_DATA_DIR=/path/to/data
- CITYPATH_GRAPH_DELIMITER=,
- CITYPATH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with CITYPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    cities_file: str = "ukcities.txt"
    pairs_file: str = "citypairs.txt"
    output_file: str = "output.txt"
    delimiter: str = "\t"
    distance_unit: str = "km"

    @property
    def cities_path(self) -> Path:
        """Full path to the city distances file."""
        return self.data_dir / self.cities_file

    @property
    def pairs_path(self) -> Path:
        """Full path to the city pairs (queries) file."""
        return self.data_dir / self.pairs_file

    @property
    def output_path(self) -> Path:
        """Full path to the report file."""
        return self.data_dir / self.output_file


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with CITYPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.cities_path)
        print(config.observability.level)

    Environment variables prefixed with CITYPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYPATH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render a log record as one JSON object per line.

    Fields passed through ``extra={...}`` are merged into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    level: Optional[str] = None,
) -> None:
    """Apply the observability settings to the root logger.

    Args:
        config: Observability settings, defaults to the global config.
        level: Optional level overriding ``config.level``.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel((level or config.level).upper())
