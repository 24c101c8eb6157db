"""
Common constants and mappings used across the strictjson library.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import TokenType

# Standard JSON escape sequences mapping
JSON_ESCAPE_MAP = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "\\": "\\",
    "/": "/",
}

WHITESPACE_CHARS = " \t\r\n"

# Characters below U+0020 must be escaped inside strings
CONTROL_CHAR_LIMIT = "\x20"

HEX_DIGITS = "0123456789abcdefABCDEF"


def get_structural_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of structural characters to TokenType enums."""
    # Import here to avoid circular imports
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        "[": TokenType.LBRACKET,
        "]": TokenType.RBRACKET,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
    }


# Characters that end a bare word
DELIMITERS = WHITESPACE_CHARS + '{}[]:,"'
