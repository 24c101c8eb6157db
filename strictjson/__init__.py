"""
strictjson - strict JSON parser with precise, located diagnostics.

strictjson builds Python values from a JSON token stream and rejects anything
outside the standard grammar. Every failure is a ParseError naming what went
wrong and where:

- UnexpectedEnd: the input stopped where a token was required
- UnexpectedToken: a token that does not fit its position
- DuplicateKey: an object key repeated within the same object
- TrailingComma: a ',' right before a closing bracket
- KeyNotInQuotes: an object key that is not a quoted string
- MissingColon: no ':' between an object key and its value

Quick Start:
    import strictjson
    data = strictjson.loads('{"foo": {"bar": 1234}}')

    # Work on tokens directly
    from strictjson import Lexer, parse
    value = parse(Lexer('[1, 2, 3]').get_all_tokens())

    # Inspect a failure
    from strictjson import ParseError, ParseErrorKind
    try:
        strictjson.loads('[1, 2, 3,]')
    except ParseError as e:
        assert e.kind is ParseErrorKind.TRAILING_COMMA
        print(e.token.position)
"""

from .core.engine import parse, loads, Parser
from .core.tokenizer import Lexer, Position, Token, TokenType, tokenize
from .utils.config import (
    ErrorReporting, ParseConfig, ParseLimits, ParsingBehavior, SizeLimits, StructureLimits
)
from .security.exceptions import (
    ErrorContext, ErrorReporter, ParseError, ParseErrorKind, SecurityError, StrictJSONError
)

__version__ = "0.1.0"
__author__ = "strictjson contributors"

__all__ = [
    # Parsing entry points
    "parse", "loads", "Parser",
    # Tokens
    "Lexer", "Token", "TokenType", "Position", "tokenize",
    # Configuration classes
    "ParseConfig", "ParseLimits", "SizeLimits", "StructureLimits",
    "ParsingBehavior", "ErrorReporting",
    # Exception classes
    "StrictJSONError", "ParseError", "ParseErrorKind", "SecurityError",
    "ErrorContext", "ErrorReporter",
]
