"""
Base parser functionality: parse contexts, leaf conversion and limit hooks.
"""

from typing import Any, NamedTuple, Optional

from ..security.limits import LimitValidator
from .tokenizer import Token


class ParseContext(NamedTuple):
    """A parsed value and the index of the first token after it.

    ``key`` is only set for object members.
    """

    value: Any
    next: int
    key: Optional[str] = None


class BaseParserMixin:
    """Common parsing functionality for token-stream parsers."""

    validator: Optional[LimitValidator]

    def parse_number_token(self, token: Token) -> float:
        """Parse a number token into a 64-bit float."""
        if self.validator:
            self.validator.validate_number_length(token.value, str(token.position))
        return float(token.value)

    def parse_string_token(self, token: Token) -> str:
        """Parse a string token, checking its length."""
        if self.validator:
            self.validator.validate_string_length(token.value, str(token.position))
        return token.value

    def parse_boolean_token(self, token: Token) -> bool:
        """Parse a boolean token."""
        return token.value == "true"

    def parse_null_token(self, token: Token) -> None:  # pylint: disable=unused-argument
        """Parse a null token."""
        return None

    def validate_and_enter_structure(self, token: Token) -> None:
        """Count one more level of nesting, opened by ``token``."""
        if self.validator:
            self.validator.enter_structure(str(token.position))

    def validate_and_exit_structure(self) -> None:
        """Leave the innermost level of nesting."""
        if self.validator:
            self.validator.exit_structure()

    def init_empty_array(self) -> list[Any]:
        """Initialize an empty array."""
        return []

    def init_empty_object(self) -> dict[str, Any]:
        """Initialize an empty object."""
        return {}
