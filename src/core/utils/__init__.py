"""
Shared logging utilities.
"""

from src.core.utils.logging import configure_logging, log_operation

__all__ = [
    "configure_logging",
    "log_operation",
]
