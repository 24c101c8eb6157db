"""
Core interfaces and protocols for the JSON parsing system.

The comma-separated list walk in the engine is shared by objects and arrays;
these protocols describe the two callables it is parameterized with.
"""

from typing import Protocol

from .parser_base import ParseContext
from .tokenizer import Token


class ElementParser(Protocol):
    """Parses one list element (a value, or a key/value pair) at an index."""

    def __call__(self, index: int) -> ParseContext:
        """Return the parsed element, raising ParseError when none fits."""
        ...


class Accumulator(Protocol):
    """Folds one parsed element into a container under construction."""

    def __call__(self, element: ParseContext, token: Token) -> None:
        """Add the element; ``token`` is where it started, for error reporting."""
        ...
