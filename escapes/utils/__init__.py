"""Utility modules for logging and exception handling."""

from escapes.utils.logging import setup_logging, get_logger
from escapes.utils.exceptions import (
    EscapeError,
    MalformedEscapeError,
    ConfigurationError,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'EscapeError',
    'MalformedEscapeError',
    'ConfigurationError',
]
