"""
Utility functions and helpers for the tinyknn library.

This module provides:
- config: Configuration management
- file_utils: JSON persistence helpers
- metrics: Timing helpers
- logging: Logging utilities
- errors: Custom exception types
"""

from tinyknn.utils.config import Config, get_config, set_global_config, load_config
from tinyknn.utils.file_utils import ensure_dir, load_json, save_json
from tinyknn.utils.metrics import Timer, CallStats
from tinyknn.utils.logging import setup_logger, set_log_level
from tinyknn.utils.errors import (
    TinyKNNError,
    ConfigError,
    SchemaError,
    InvalidInputError,
    SearchError,
    StateError
)

__all__ = [
    # Configuration
    "Config",
    "get_config",
    "set_global_config",
    "load_config",

    # File utilities
    "ensure_dir",
    "load_json",
    "save_json",

    # Metrics utilities
    "Timer",
    "CallStats",

    # Logging utilities
    "setup_logger",
    "set_log_level",

    # Error classes
    "TinyKNNError",
    "ConfigError",
    "SchemaError",
    "InvalidInputError",
    "SearchError",
    "StateError"
]
