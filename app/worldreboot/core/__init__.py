"""Core regeneration logic.

This module exports the erasure primitives, the configuration model
and the run entry points.
"""

from worldreboot.core.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    RegenerationConfig,
    ensure_config,
    load_config,
    save_config,
)
from worldreboot.core.eraser import (
    ErasureError,
    ErasureErrorKind,
    delete_recursively,
    erase_contents,
)
from worldreboot.core.runner import RunSummary, TargetOutcome, regenerate, run

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ErasureError",
    "ErasureErrorKind",
    "RegenerationConfig",
    "RunSummary",
    "TargetOutcome",
    "delete_recursively",
    "ensure_config",
    "erase_contents",
    "load_config",
    "regenerate",
    "run",
    "save_config",
]
