"""Logging helpers shared by the library modules and the CLI.

Library code only emits records; ``configure_logging`` is called by entry
points that own the process.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from .constants import Constants


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler using the project log format.

    Args:
        level: Explicit level name; falls back to the environment variable
            named by ``Constants.ENV_LOG_LEVEL``, then ``Constants.DEFAULT_LOG_LEVEL``.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.DEFAULT_LOG_LEVEL).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True if DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records, dropping None values."""
    return {key: value for key, value in fields.items() if value is not None}
