"""Core configuration, logging and display formatting."""

from .config import Settings, get_settings, settings
from .formatting import format_amount, format_timestamp, resolve_currency
from .logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "format_amount",
    "format_timestamp",
    "resolve_currency",
    "setup_logging",
]
