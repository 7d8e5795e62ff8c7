"""Helper utilities."""

import asyncio
import logging
from functools import wraps
from typing import Any, Callable

from rich.logging import RichHandler

from .output import err_console


def async_to_sync(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to run async functions synchronously."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(func(*args, **kwargs))

    return wrapper


def setup_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log DEBUG and above instead of WARNING and above
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
