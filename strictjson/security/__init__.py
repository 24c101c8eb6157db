"""
strictjson Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    ErrorReporter,
    ParseError,
    ParseErrorKind,
    SecurityError,
    StrictJSONError,
)
from .limits import LimitValidator

__all__ = [
    'ParseError', 'ParseErrorKind', 'SecurityError', 'StrictJSONError',
    'ErrorReporter', 'LimitValidator',
]
