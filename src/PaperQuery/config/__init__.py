"""Public configuration API for PaperQuery."""

from __future__ import annotations

from PaperQuery.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from PaperQuery.config.output import OutputConfig
from PaperQuery.config.query import QueryConfig, SavedSearch
from PaperQuery.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "QueryConfig",
    "SavedSearch",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
