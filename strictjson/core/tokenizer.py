"""
Lexer for strictjson - tokenizes input strings for parsing.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .constants import (
    CONTROL_CHAR_LIMIT,
    DELIMITERS,
    HEX_DIGITS,
    JSON_ESCAPE_MAP,
    WHITESPACE_CHARS,
    get_structural_token_map,
)


class TokenType(Enum):
    """Token types for JSON parsing."""

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COLON = "COLON"
    COMMA = "COMMA"

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    IDENTIFIER = "IDENTIFIER"


@dataclass(frozen=True)
class Position:
    """Position in source text (line and column, plus character offset)."""

    line: int
    column: int
    offset: int = 0

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class Token(NamedTuple):
    """Token with type, value and position information."""

    type: TokenType
    value: str
    position: Position


class Lexer:
    """Lexical analyzer for JSON input."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column, self.pos)

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Advance position and return the current character."""
        if self.pos >= len(self.text):
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_whitespace(self) -> None:
        """Skip insignificant whitespace, newlines included."""
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE_CHARS:
            self.advance()

    def read_string(self) -> Optional[str]:
        """Read a double-quoted string with escape sequence handling.

        Returns None when the closing quote is never found, or when the
        string holds an unknown escape, a short ``\\u`` escape or a raw
        control character. A malformed string is still read up to its
        closing quote.
        """
        result = ""
        valid = True
        self.advance()

        while self.pos < len(self.text):
            char = self.peek()

            if char == '"':
                self.advance()
                return result if valid else None
            if char == "\\":
                self.advance()
                next_char = self.peek()
                if next_char == "u":
                    saved = (self.pos, self.line, self.column)
                    unicode_result = self._read_unicode_escape()
                    if unicode_result is not None:
                        result += unicode_result
                    else:
                        self.pos, self.line, self.column = saved
                        valid = False
                elif next_char in JSON_ESCAPE_MAP:
                    result += JSON_ESCAPE_MAP[next_char]
                    self.advance()
                else:
                    valid = False
            elif char < CONTROL_CHAR_LIMIT:
                self.advance()
                valid = False
            else:
                result += self.advance()

        return None

    def read_number(self) -> str:
        """Read a numeric literal following the JSON number grammar."""
        result = ""

        if self.peek() == "-":
            result += self.advance()

        if self.peek() == "0":
            result += self.advance()
        else:
            result += self._read_digits()

        if self.peek() == "." and self.peek(1).isdigit():
            result += self.advance()
            result += self._read_digits()

        if self.peek() in ("e", "E") and (
            self.peek(1).isdigit()
            or (self.peek(1) in ("+", "-") and self.peek(2).isdigit())
        ):
            result += self.advance()
            if self.peek() in ("+", "-"):
                result += self.advance()
            result += self._read_digits()

        return result

    def _read_digits(self) -> str:
        digits = ""
        while self.pos < len(self.text) and self.peek().isdigit():
            digits += self.advance()
        return digits

    def read_bare_word(self) -> str:
        """Read characters up to the next delimiter."""
        result = ""
        while self.pos < len(self.text) and self.peek() not in DELIMITERS:
            result += self.advance()
        return result

    def _read_unicode_escape(self) -> Optional[str]:
        """Read a Unicode escape sequence."""
        if self.peek() != "u":
            return None

        self.advance()
        hex_digits = self._read_hex_digits()
        if hex_digits is None:
            return None

        return self._process_unicode_code_point(int(hex_digits, 16))

    def _read_hex_digits(self) -> Optional[str]:
        """Read exactly 4 hexadecimal digits."""
        hex_digits = ""
        for _ in range(4):
            char = self.peek()
            if char and char in HEX_DIGITS:
                hex_digits += self.advance()
            else:
                return None
        return hex_digits

    def _process_unicode_code_point(self, code_point: int) -> str:
        """Process a Unicode code point, handling surrogates."""
        if 0xD800 <= code_point <= 0xDBFF:
            return self._handle_high_surrogate(code_point)
        if 0xDC00 <= code_point <= 0xDFFF:
            return "\ufffd"  # Unicode replacement character
        return chr(code_point)

    def _handle_high_surrogate(self, code_point: int) -> str:
        """Handle high surrogate pair."""
        low_surrogate = self._read_low_surrogate()
        if low_surrogate is not None:
            high = code_point - 0xD800
            low = low_surrogate - 0xDC00
            return chr(0x10000 + (high << 10) + low)
        return "\ufffd"

    def _read_low_surrogate(self) -> Optional[int]:
        """Read the low surrogate pair for Unicode surrogates."""
        saved = (self.pos, self.line, self.column)

        if self.peek() == "\\" and self.peek(1) == "u":
            self.advance()
            self.advance()

            hex_digits = self._read_hex_digits()
            if hex_digits is not None:
                code_point = int(hex_digits, 16)
                if 0xDC00 <= code_point <= 0xDFFF:
                    return code_point

            self.pos, self.line, self.column = saved
        return None

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text into a sequence of tokens."""
        while self.pos < len(self.text):
            self.skip_whitespace()

            if self.pos >= len(self.text):
                break

            char = self.peek()
            pos = self.current_position()

            token = self._try_structural_token(char, pos)
            if token:
                yield token
                continue

            token = self._try_string_token(char, pos)
            if token:
                yield token
                continue

            token = self._try_number_token(char, pos)
            if token:
                yield token
                continue

            yield self._bare_word_token(pos)

    def _try_structural_token(self, char: str, pos: Position) -> Optional[Token]:
        """Try to create structural tokens (braces, brackets, etc.)."""
        token_map = get_structural_token_map()

        if char in token_map:
            self.advance()
            return Token(token_map[char], char, pos)
        return None

    def _try_string_token(self, char: str, pos: Position) -> Optional[Token]:
        """Try to create a string token.

        An unterminated or malformed string becomes an IDENTIFIER holding the
        raw text so the parser rejects it at its starting position.
        """
        if char != '"':
            return None

        string_value = self.read_string()
        if string_value is None:
            return Token(TokenType.IDENTIFIER, self.text[pos.offset : self.pos], pos)
        return Token(TokenType.STRING, string_value, pos)

    def _try_number_token(self, char: str, pos: Position) -> Optional[Token]:
        """Try to create a number token."""
        if char.isdigit() or (char == "-" and self.peek(1).isdigit()):
            return Token(TokenType.NUMBER, self.read_number(), pos)
        return None

    def _bare_word_token(self, pos: Position) -> Token:
        """Create a keyword token, or an IDENTIFIER for anything else."""
        word = self.read_bare_word() or self.advance()

        if word in {"true", "false"}:
            return Token(TokenType.BOOLEAN, word, pos)
        if word == "null":
            return Token(TokenType.NULL, word, pos)
        return Token(TokenType.IDENTIFIER, word, pos)

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())


def tokenize(text: str) -> list[Token]:
    """Tokenize text into a list of tokens."""
    return Lexer(text).get_all_tokens()
