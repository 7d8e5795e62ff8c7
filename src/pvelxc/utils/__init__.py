"""Utility functions and helpers."""

from .helpers import async_to_sync, setup_logging
from .output import (
    confirm,
    console,
    err_console,
    format_bytes,
    format_uptime,
    get_status_color,
    print_cancelled,
    print_error,
    print_info,
    print_success,
    usage_bar,
)

__all__ = [
    "async_to_sync",
    "confirm",
    "console",
    "err_console",
    "format_bytes",
    "format_uptime",
    "get_status_color",
    "print_cancelled",
    "print_error",
    "print_info",
    "print_success",
    "setup_logging",
    "usage_bar",
]
