"""
minilang Lexer - turns source text into a flat list of classified tokens.

Scanning is driven by the ordered rule table in ``tokens.TOKEN_RULES``:
at every position the first rule that matches wins. Characters that start
no token become lexical errors.

Author: minilang developers
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .tokens import Token, TokenType, SourceLocation, TOKEN_RULES, MALFORMED_NUMBER_PATTERN
from .errors import LexerError, create_invalid_character_error, create_invalid_number_error

logger = logging.getLogger(__name__)


@dataclass
class LexResult:
    """
    Outcome of one tokenizer run.

    Exactly one side is populated: ``errors`` is empty on success,
    ``tokens`` is empty on failure.
    """
    tokens: List[Token] = field(default_factory=list)
    errors: List[LexerError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def messages(self) -> List[str]:
        """Descriptive strings for every lexical error, in source order."""
        return [error.message for error in self.errors]


class Lexer:
    """
    minilang lexical analyzer.

    Converts source text into a stream of tokens. By default every
    unrecognized character is recorded and scanning continues; with
    ``fail_fast`` the scan stops at the first one.
    """

    def __init__(self, source: str, filename: str = "<input>", fail_fast: bool = False):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source for error reporting
            fail_fast: Stop at the first unrecognized character
        """
        self.source = source
        self.filename = filename
        self.fail_fast = fail_fast
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> LexResult:
        """
        Tokenize the entire source code.

        Returns:
            LexResult with either the token list or the lexical errors
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []

        while self.pos < len(self.source):
            if self.source[self.pos].isspace():
                self._advance_by(1)
                continue

            try:
                self.tokens.append(self._next_token())
            except LexerError as e:
                self.errors.append(e)
                if self.fail_fast:
                    break
                # Recover by skipping the offending text
                self._advance_by(len(e.character))

        if self.errors:
            logger.debug("%s: %d lexical error(s)", self.filename, len(self.errors))
            return LexResult(tokens=[], errors=list(self.errors))

        logger.debug("%s: %d token(s)", self.filename, len(self.tokens))
        return LexResult(tokens=list(self.tokens), errors=[])

    def _next_token(self) -> Token:
        """Match the ordered rules against the remaining text."""
        location = self._location()
        remaining = self.source[self.pos:]

        for pattern, token_type in TOKEN_RULES:
            match = pattern.match(remaining)
            if match and match.group(0):
                lexeme = match.group(0)
                self._advance_by(len(lexeme))
                return Token(token_type, lexeme, location)

        malformed = MALFORMED_NUMBER_PATTERN.match(remaining)
        if malformed:
            raise create_invalid_number_error(malformed.group(0), location)

        raise create_invalid_character_error(self.source[self.pos], location)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance_by(self, count: int):
        """Advance position by count characters, tracking line and column."""
        for _ in range(count):
            if self.pos >= len(self.source):
                return
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1


def tokenize(source: str, filename: str = "<input>", fail_fast: bool = False) -> LexResult:
    """Tokenize ``source`` with a fresh lexer."""
    return Lexer(source, filename, fail_fast=fail_fast).tokenize()


def format_tokens(tokens: List[Token]) -> List[str]:
    """Render tokens as ``kind: text`` lines."""
    return [f"{token.type.label}: {token.lexeme}" for token in tokens]
