"""
minilang Lexer Package

Implements the tokenizer for minilang: an ordered list of (pattern, kind)
rules is tried at every position and the first match wins.

Key Features:
- Keywords tried before identifiers, comparators before '='
- Numbers never swallow a following word character (``123abc``)
- Per-character error recovery (or fail-fast on request)
- Source location tracking for diagnostics

Author: minilang developers
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, LexResult, tokenize, format_tokens
from .errors import Diagnostic, LexerError, LEXICAL_ERROR_PREFIX

__all__ = [
    "Lexer",
    "LexResult",
    "tokenize",
    "format_tokens",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "LEXICAL_ERROR_PREFIX",
]
