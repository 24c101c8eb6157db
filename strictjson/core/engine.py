"""
Parser for strictjson - converts tokens into Python data structures.

Objects and arrays are both comma-separated lists; they share one list walk
(Parser.for_each_comma) and differ only in how an element is parsed and how
it is folded into the container being built.
"""

import logging
from collections.abc import Sequence
from typing import Any, NoReturn, Optional, Union, cast

from ..security.exceptions import ErrorReporter, ParseError, ParseErrorKind, SecurityError
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .interfaces import Accumulator, ElementParser
from .parser_base import BaseParserMixin, ParseContext
from .tokenizer import Lexer, Token, TokenType

logger = logging.getLogger(__name__)


class Parser(BaseParserMixin):
    """Recursive-descent parser over an immutable token sequence."""

    def __init__(
        self,
        tokens: Sequence[Token],
        config: Optional[ParseConfig] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.tokens = tokens
        self.config = config or ParseConfig()
        self.validator = (
            LimitValidator(self.config.limits) if self.config.limits else None
        )
        self.error_reporter = error_reporter

    def token_at(self, index: int) -> Optional[Token]:
        """Token at ``index``, or None past the end of the stream."""
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def expect(
        self, token_type: TokenType, error_kind: ParseErrorKind, index: int
    ) -> Token:
        """Return the token at ``index`` if it has the required type."""
        token = self.token_at(index)
        if token is None:
            self._raise_parse_error(ParseErrorKind.UNEXPECTED_END)
        if token.type != token_type:
            self._raise_parse_error(error_kind, token, token_type)
        return token

    def value(self, index: int) -> ParseContext:
        """Parse any JSON value starting at ``index``."""
        token = self.token_at(index)
        if token is None:
            self._raise_parse_error(ParseErrorKind.UNEXPECTED_END)

        if token.type == TokenType.NULL:
            return ParseContext(self.parse_null_token(token), index + 1)
        if token.type == TokenType.BOOLEAN:
            return ParseContext(self.parse_boolean_token(token), index + 1)
        if token.type == TokenType.NUMBER:
            return ParseContext(self.parse_number_token(token), index + 1)
        if token.type == TokenType.STRING:
            return ParseContext(self.parse_string_token(token), index + 1)
        if token.type == TokenType.LBRACE:
            return self.object(index)
        if token.type == TokenType.LBRACKET:
            return self.array(index)

        self._raise_parse_error(ParseErrorKind.UNEXPECTED_TOKEN, token)

    def for_each_comma(
        self, element_parser: ElementParser, accumulator: Accumulator, start: int
    ) -> int:
        """Walk a comma-separated list of elements beginning at ``start``.

        Each parsed element is handed to ``accumulator`` together with the
        token it started at. The walk stops when no element can start at the
        current token or when an element is not followed by a comma, and
        returns the index of the token that ended the list. The caller checks
        that this token is the closing bracket.

        An UNEXPECTED_TOKEN raised at the first token of an element means the
        list is over; any other failure propagates. A comma with no element
        after it raises TRAILING_COMMA.
        """
        index = start
        last_comma: Optional[Token] = None

        while True:
            try:
                element = element_parser(index)
            except ParseError as error:
                if self._ends_list(error, index):
                    break
                raise

            accumulator(element, self.tokens[index])
            last_comma = None
            index = element.next

            try:
                last_comma = self.expect(
                    TokenType.COMMA, ParseErrorKind.UNEXPECTED_TOKEN, index
                )
            except ParseError:
                break
            index += 1

        if last_comma is not None:
            self._raise_parse_error(ParseErrorKind.TRAILING_COMMA, last_comma)
        return index

    def _ends_list(self, error: ParseError, index: int) -> bool:
        return (
            error.kind == ParseErrorKind.UNEXPECTED_TOKEN
            and error.token is not None
            and error.token is self.token_at(index)
        )

    def expect_key(self, index: int) -> str:
        """Return the object key at ``index``; keys must be quoted strings."""
        token = self.token_at(index)
        if token is None:
            self._raise_parse_error(ParseErrorKind.UNEXPECTED_END)
        if token.type == TokenType.STRING:
            return self.parse_string_token(token)
        if token.type == TokenType.RBRACE:
            self._raise_parse_error(ParseErrorKind.UNEXPECTED_TOKEN, token)
        self._raise_parse_error(ParseErrorKind.KEY_NOT_IN_QUOTES, token)

    def key_value_pair(self, start: int) -> ParseContext:
        """Parse ``"key": value`` starting at ``start``."""
        key = self.expect_key(start)
        self.expect(TokenType.COLON, ParseErrorKind.MISSING_COLON, start + 1)
        member = self.value(start + 2)
        return ParseContext(member.value, member.next, key)

    def object(self, start: int) -> ParseContext:
        """Parse a JSON object whose '{' is at ``start``."""
        self.validate_and_enter_structure(self.tokens[start])
        obj = self.init_empty_object()

        def insert(member: ParseContext, key_token: Token) -> None:
            key = cast(str, member.key)
            if key in obj:
                self._raise_parse_error(ParseErrorKind.DUPLICATE_KEY, key_token)
            obj[key] = member.value
            if self.validator:
                self.validator.validate_object_keys(len(obj))

        index = self.for_each_comma(self.key_value_pair, insert, start + 1)
        self.expect(TokenType.RBRACE, ParseErrorKind.UNEXPECTED_TOKEN, index)
        self.validate_and_exit_structure()
        return ParseContext(obj, index + 1)

    def array(self, start: int) -> ParseContext:
        """Parse a JSON array whose '[' is at ``start``."""
        self.validate_and_enter_structure(self.tokens[start])
        arr = self.init_empty_array()

        def append(element: ParseContext, _token: Token) -> None:
            arr.append(element.value)
            if self.validator:
                self.validator.validate_array_items(len(arr))

        index = self.for_each_comma(self.value, append, start + 1)
        self.expect(TokenType.RBRACKET, ParseErrorKind.UNEXPECTED_TOKEN, index)
        self.validate_and_exit_structure()
        return ParseContext(arr, index + 1)

    def parse(self) -> Any:
        """Parse the first value in the stream; later tokens are not examined."""
        return self._parse_first_value().value

    def parse_document(self) -> Any:
        """Parse one value and require that it uses up the whole stream."""
        context = self._parse_first_value()
        if not self.config.allow_trailing_tokens:
            extra = self.token_at(context.next)
            if extra is not None:
                self._raise_parse_error(ParseErrorKind.UNEXPECTED_TOKEN, extra)
        return context.value

    def _parse_first_value(self) -> ParseContext:
        if self.validator:
            self.validator.reset()
        try:
            return self.value(0)
        except RecursionError as e:
            raise SecurityError(
                f"Nesting exceeds the interpreter recursion limit "
                f"(max_nesting_depth is {self.config.limits.max_nesting_depth}): "
                "too deeply nested"
            ) from e

    def _raise_parse_error(
        self,
        kind: ParseErrorKind,
        token: Optional[Token] = None,
        expected: Optional[TokenType] = None,
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(kind, token, expected)
        raise ParseError(kind, token, expected)


def parse(tokens: Sequence[Token], config: Optional[ParseConfig] = None) -> Any:
    """
    Build a Python value from a token stream.

    Only the first complete value is parsed; tokens after it are ignored.
    Use loads() to parse text and reject trailing input.

    Args:
        tokens: Tokens as produced by Lexer
        config: Optional ParseConfig for security limits

    Returns:
        None, bool, float, str, list or dict

    Raises:
        ParseError: On the first grammar violation
        SecurityError: If security limits are exceeded
    """
    try:
        return Parser(tokens, config).parse()
    except (ParseError, SecurityError) as e:
        logger.debug("Parse failed: %s", e.message)
        raise


def loads(
    s: Union[str, bytes, bytearray], *, config: Optional[ParseConfig] = None
) -> Any:
    """
    Parse a complete JSON document.

    Args:
        s: JSON text (str, or UTF-8 encoded bytes/bytearray)
        config: Optional ParseConfig for limits, trailing input and error detail

    Returns:
        None, bool, float, str, list or dict

    Raises:
        ParseError: On the first grammar violation, located in the source text
        SecurityError: If security limits are exceeded
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, bytes or bytearray, not {type(s).__name__}"
        )

    if config is None:
        config = ParseConfig()

    if config.limits:
        LimitValidator(config.limits).validate_input_size(s)

    error_reporter = (
        ErrorReporter(s, config.max_error_context, config.include_context)
        if config.include_position
        else None
    )
    parser = Parser(Lexer(s).get_all_tokens(), config, error_reporter)

    try:
        return parser.parse_document()
    except (ParseError, SecurityError) as e:
        logger.debug("Parse failed: %s", e.message)
        raise
