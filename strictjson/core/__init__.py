"""
strictjson Core Parsing Engine.

This module provides the fundamental JSON parsing capabilities.
"""

from .engine import parse, loads, Parser
from .parser_base import ParseContext
from .tokenizer import Lexer, Token, TokenType, Position, tokenize

__all__ = [
    'parse', 'loads', 'Parser', 'ParseContext',
    'Lexer', 'Token', 'TokenType', 'Position', 'tokenize',
]
