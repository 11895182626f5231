"""
Utility modules for varnorm.

Provides rich logging configuration and call tracing.
"""

from .logging import get_logger, log_call, setup_logging

__all__ = [
    "get_logger",
    "log_call",
    "setup_logging",
]
