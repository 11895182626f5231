"""
Logging utilities for varnorm.

Log records are rendered with rich on stderr, leaving stdout to command
output, and can be mirrored to a plain-text file.
"""

import logging
import time
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "setup_logging",
    "get_logger",
    "log_call",
]

_console = Console(stderr=True)

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """
    Configure root logging for a varnorm run.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        log_file: Optional file that receives the same records.
    """
    handlers: list[logging.Handler] = [
        RichHandler(
            console=_console,
            rich_tracebacks=True,
            markup=False,
            show_path=verbose,
        )
    ]

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,  # replace handlers from any earlier run in this process
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    return logging.getLogger(name)


def _format_args(args: tuple, kwargs: dict) -> str:
    parts = [repr(a) for a in args]
    parts.extend(f"{k}={v!r}" for k, v in kwargs.items())
    return ", ".join(parts)


def log_call(logger: logging.Logger | None = None) -> Callable:
    """
    Decorator that traces a function's arguments, duration and failures.

    Rejected input (``ValueError`` and subclasses) is logged at WARNING,
    anything else at ERROR. The exception is always re-raised.

    Example:
        @log_call(logger)
        def normalize_variant(position: int, reference: str, alternate: str) -> Variant:
            ...
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = logger or logging.getLogger(func.__module__)
            log.debug("%s(%s)", func.__name__, _format_args(args, kwargs))
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except ValueError as e:
                log.warning("%s failed: %s", func.__name__, e)
                raise
            except Exception as e:
                log.error("%s failed: %s", func.__name__, e)
                raise
            log.debug("%s completed in %.1f us", func.__name__, (time.perf_counter() - start) * 1e6)
            return result

        return wrapper

    return decorator
