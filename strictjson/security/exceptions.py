"""
Exceptions and error reporting for strictjson.

Every grammar violation is a ParseError carrying one of the closed set of
ParseErrorKind values, the offending token (when one exists) and the token
type that was required instead (when one was). Limit violations are
SecurityError and sit outside that taxonomy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.tokenizer import Position, Token, TokenType

# Longest token text quoted verbatim in a message
MAX_TOKEN_DISPLAY = 20

TOKEN_TYPE_DESCRIPTIONS = {
    TokenType.LBRACE: "'{'",
    TokenType.RBRACE: "'}'",
    TokenType.LBRACKET: "'['",
    TokenType.RBRACKET: "']'",
    TokenType.COLON: "':'",
    TokenType.COMMA: "','",
    TokenType.STRING: "string",
    TokenType.NUMBER: "number",
    TokenType.BOOLEAN: "boolean",
    TokenType.NULL: "null",
    TokenType.IDENTIFIER: "identifier",
}


class ParseErrorKind(Enum):
    """The ways a token stream can fail to form a JSON value."""

    UNEXPECTED_END = "UnexpectedEnd"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    DUPLICATE_KEY = "DuplicateKey"
    TRAILING_COMMA = "TrailingComma"
    KEY_NOT_IN_QUOTES = "KeyNotInQuotes"
    MISSING_COLON = "MissingColon"


@dataclass
class ErrorContext:
    """Source excerpt around an error position."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class StrictJSONError(Exception):
    """Base class for all strictjson errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.position is not None:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context is not None:
            parts.append("Context:")
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)

    def __str__(self) -> str:
        return self._format_message()


def describe_token(token: Token) -> str:
    """Render a token the way it appeared in the source."""
    text = token.value
    if len(text) > MAX_TOKEN_DISPLAY:
        text = text[: MAX_TOKEN_DISPLAY - 3] + "..."
    if token.type == TokenType.STRING:
        return f'"{text}"'
    return f"'{text}'"


def describe_error(
    kind: ParseErrorKind, token: Optional[Token], expected: Optional[TokenType]
) -> str:
    """Build the headline message for a parse error."""
    found = describe_token(token) if token is not None else "end of input"

    if kind == ParseErrorKind.UNEXPECTED_END:
        return "Unexpected end of input"
    if kind == ParseErrorKind.DUPLICATE_KEY:
        return f"Duplicate object key {found}"
    if kind == ParseErrorKind.TRAILING_COMMA:
        return "Trailing comma before closing bracket"
    if kind == ParseErrorKind.KEY_NOT_IN_QUOTES:
        return f"Object key must be a quoted string, found {found}"
    if kind == ParseErrorKind.MISSING_COLON:
        return f"Expected ':' after object key, found {found}"

    message = f"Unexpected token {found}"
    if expected is not None:
        message += f", expected {TOKEN_TYPE_DESCRIPTIONS[expected]}"
    return message


class ParseError(StrictJSONError):
    """A grammar violation found while parsing a token stream."""

    def __init__(
        self,
        kind: ParseErrorKind,
        token: Optional[Token] = None,
        expected: Optional[TokenType] = None,
        *,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.kind = kind
        self.token = token
        self.expected = expected
        if position is None and token is not None:
            position = token.position
        super().__init__(
            describe_error(kind, token, expected), position, context, suggestions
        )


class SecurityError(StrictJSONError):
    """A configured resource limit was exceeded."""


class ErrorSuggestionEngine:
    """Canned hints for each kind of parse error."""

    SUGGESTIONS = {
        ParseErrorKind.UNEXPECTED_END: [
            "Check for an unclosed '{' or '['",
            "Make sure the input is not truncated",
        ],
        ParseErrorKind.UNEXPECTED_TOKEN: [
            "Check for a missing ',' between elements",
            "Check that every '{' and '[' is closed by the matching bracket",
        ],
        ParseErrorKind.DUPLICATE_KEY: [
            "Each key may appear only once per object",
            "Rename or remove the repeated key",
        ],
        ParseErrorKind.TRAILING_COMMA: [
            "Remove the ',' before the closing bracket",
        ],
        ParseErrorKind.KEY_NOT_IN_QUOTES: [
            "Wrap object keys in double quotes, e.g. {\"key\": 1}",
        ],
        ParseErrorKind.MISSING_COLON: [
            "Separate each key from its value with ':'",
        ],
    }

    @classmethod
    def suggest_for(
        cls, kind: ParseErrorKind, expected: Optional[TokenType] = None
    ) -> list[str]:
        """Suggestions for an error of the given kind."""
        suggestions = list(cls.SUGGESTIONS[kind])
        if kind == ParseErrorKind.UNEXPECTED_TOKEN and expected is not None:
            suggestions.insert(0, f"Insert {TOKEN_TYPE_DESCRIPTIONS[expected]} here")
        return suggestions


class ErrorReporter:
    """Builds located, contextual errors against the source text."""

    def __init__(
        self, text: str, max_context: int = 50, include_context: bool = True
    ) -> None:
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context
        self.include_context = include_context

    def end_position(self) -> Position:
        """Position just past the last character of the text."""
        return Position(len(self.lines), len(self.lines[-1]) + 1, len(self.text))

    def build_context(self, position: Position) -> ErrorContext:
        """Build the source excerpt around a position."""
        line_index = min(max(position.line - 1, 0), len(self.lines) - 1)
        line = self.lines[line_index]
        column_index = min(max(position.column - 1, 0), len(line))

        half = self.max_context // 2
        start = max(0, column_index - half)
        end = min(len(line), column_index + half)

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=line[start:column_index],
            context_after=line[column_index:end],
            error_char=line[column_index : column_index + 1],
            line_text=line[start:end],
            column_indicator=" " * (column_index - start) + "^",
        )

    def create_parse_error(
        self,
        kind: ParseErrorKind,
        token: Optional[Token] = None,
        expected: Optional[TokenType] = None,
    ) -> ParseError:
        """Create a ParseError located against this reporter's text."""
        position = token.position if token is not None else self.end_position()
        context = self.build_context(position) if self.include_context else None

        return ParseError(
            kind,
            token,
            expected,
            position=position,
            context=context,
            suggestions=ErrorSuggestionEngine.suggest_for(kind, expected),
        )

