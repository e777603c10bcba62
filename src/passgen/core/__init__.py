"""Core PassGen utilities.

This module exports configuration and logging helpers for use throughout
the application.
"""

from passgen.core.config import Settings, get_settings
from passgen.core.logging import (
    LoggingContext,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "clear_context",
]
