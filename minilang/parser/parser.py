"""
minilang syntax checker

A small recursive-descent parser over the flat token list. It builds no
tree: each construct (declaration, conditional, assignment, value) has a
parsing method that either consumes its tokens or raises a ParseError
naming the token index where the grammar was violated.

Grammar:
    program      := statement*
    statement    := declaration | conditional | assignment | ';'
    declaration  := ('let'|'const'|'var') declarator (',' declarator)* ';'
    declarator   := IDENT ('[' NUMBER? ']')? ('=' value)?
    value        := STRING | operand ((ARITH | COMPARATOR) operand)*
    operand      := IDENT | NUMBER
    conditional  := ('if'|'while') '(' operand COMPARATOR operand ')' block
                    ('else' (block | conditional))?
    block        := '{' statement* '}'
    assignment   := IDENT '=' value ';'

Author: minilang developers
"""

import logging
from typing import List, Optional

from ..lexer.tokens import Token, TokenType, CONDITIONAL_KEYWORDS
from .errors import (
    ParseError, SYNTAX_OK, create_missing_token_error, create_unexpected_token_error,
    create_isolated_identifier_error, create_invalid_assignment_error,
    create_invalid_operand_error, create_unclosed_block_error,
    create_unmatched_brace_error, create_else_without_if_error
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Recursive-descent checker for the minilang grammar.

    Stops at the first violation; there is no error recovery.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens = tokens
        self.current = 0

    def parse(self) -> None:
        """Check the whole token list. Raises ParseError on the first violation."""
        self.current = 0
        while not self._is_at_end():
            if self._peek().is_punct('}'):
                raise create_unmatched_brace_error(self._peek(), self.current)
            self._parse_statement()

    # ========================================================================
    # Statements
    # ========================================================================

    def _parse_statement(self):
        token = self._peek()

        if token.is_declaration_keyword:
            self._parse_declaration()
        elif token.is_keyword and token.lexeme in CONDITIONAL_KEYWORDS:
            self._parse_conditional()
        elif token.is_keyword and token.lexeme == "else":
            raise create_else_without_if_error(token, self.current)
        elif token.type == TokenType.IDENTIFIER:
            if self._peek(1) is not None and self._peek(1).type == TokenType.ASSIGN:
                self._parse_assignment()
            else:
                raise create_isolated_identifier_error(token, self.current)
        elif token.type == TokenType.ASSIGN:
            raise create_invalid_assignment_error(token, self.current)
        elif token.is_arithmetic_operator or token.is_comparator:
            raise create_invalid_operand_error(token, self.current, "before")
        elif token.type == TokenType.SEMICOLON:
            self._advance()
        else:
            raise create_unexpected_token_error(token, self.current)

    def _parse_declaration(self):
        keyword = self._advance()
        self._parse_declarator(after=f"'{keyword.lexeme}'")

        while self._check(','):
            self._advance()
            self._parse_declarator(after="','")

        if self._check('=') and self._previous() is not None and not self._previous().is_identifier:
            raise create_invalid_assignment_error(self._peek(), self.current)
        self._consume(';', "';'", "at the end of the declaration")

    def _parse_declarator(self, after: str):
        if self._peek() is None or not self._peek().is_identifier:
            raise create_missing_token_error("an identifier", f"after {after}", self.current, self._peek())
        self._advance()

        if self._check('['):
            self._advance()
            if self._peek() is not None and self._peek().type == TokenType.NUMBER:
                self._advance()
            self._consume(']', "']'", "to close the array size")
            return

        if self._check('='):
            self._advance()
            self._parse_value()

    def _parse_assignment(self):
        self._advance()  # identifier
        self._advance()  # '='
        self._parse_value()
        self._consume(';', "';'", "at the end of the assignment")

    def _parse_conditional(self):
        start = self.current
        keyword = self._advance()

        self._expect_at(start + 1, '(', "'('", f"after '{keyword.lexeme}'")
        self._expect_operand_at(start + 2, "after '('")
        if self._peek() is None or not self._peek().is_comparator:
            raise create_missing_token_error("a comparison operator", "in the condition",
                                             self.current, self._peek())
        comparator = self._advance()
        self._expect_operand_at(start + 4, f"after '{comparator.lexeme}'")
        self._expect_at(start + 5, ')', "')'", "after the condition")
        self._expect_at(start + 6, '{', "'{'", "after ')'")
        self._parse_block_body(open_index=start + 6)

        if keyword.lexeme == "if" and self._peek() is not None and self._peek().is_keyword \
                and self._peek().lexeme == "else":
            self._advance()
            if self._check('{'):
                open_index = self.current
                self._advance()
                self._parse_block_body(open_index)
            elif self._peek() is not None and self._peek().is_keyword and self._peek().lexeme == "if":
                self._parse_conditional()
            else:
                raise create_missing_token_error("'{' or 'if'", "after 'else'", self.current, self._peek())

    def _parse_block_body(self, open_index: int):
        """Parse statements up to the '}' matching the '{' at open_index."""
        while True:
            if self._is_at_end():
                raise create_unclosed_block_error(open_index, None, self.current)
            if self._check('}'):
                self._advance()
                return
            self._parse_statement()

    # ========================================================================
    # Values
    # ========================================================================

    def _parse_value(self):
        """value := STRING | operand ((ARITH | COMPARATOR) operand)*"""
        token = self._peek()
        if token is not None and token.type == TokenType.STRING:
            self._advance()
            if self._peek() is not None and self._is_binary_operator(self._peek()):
                raise create_invalid_operand_error(self._peek(), self.current, "before")
            return

        if token is None or not token.is_operand:
            raise create_missing_token_error("a number, identifier or string", "after '='",
                                             self.current, token)
        self._advance()

        while self._peek() is not None and self._is_binary_operator(self._peek()):
            operator = self._advance()
            if self._peek() is None or not self._peek().is_operand:
                raise create_invalid_operand_error(operator, self.current - 1, "after")
            self._advance()

    @staticmethod
    def _is_binary_operator(token: Token) -> bool:
        return token.is_arithmetic_operator or token.is_comparator

    # ========================================================================
    # Helpers
    # ========================================================================

    def _expect_at(self, index: int, text: str, expected: str, context: str):
        if self.current != index or not self._check(text):
            raise create_missing_token_error(expected, context, index, self._peek())
        self._advance()

    def _expect_operand_at(self, index: int, context: str):
        if self.current != index or self._peek() is None or not self._peek().is_operand:
            raise create_missing_token_error("an identifier or number", context, index, self._peek())
        self._advance()

    def _consume(self, text: str, expected: str, context: str) -> Token:
        if not self._check(text):
            raise create_missing_token_error(expected, context, self.current, self._peek())
        return self._advance()

    def _check(self, text: str) -> bool:
        token = self._peek()
        return token is not None and token.is_punct(text)

    def _peek(self, offset: int = 0) -> Optional[Token]:
        """Token at current + offset, or None when out of range."""
        index = self.current + offset
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def _previous(self) -> Optional[Token]:
        return self._peek(-1)

    def _advance(self) -> Token:
        token = self.tokens[self.current]
        self.current += 1
        return token

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens)


def check_syntax(tokens: List[Token]) -> str:
    """
    Check the structure of a token list.

    Returns:
        SYNTAX_OK, or the message of the first violation found
    """
    try:
        Parser(tokens).parse()
    except ParseError as e:
        logger.debug("syntax check failed: %s", e.message)
        return e.message
    logger.debug("syntax check passed for %d token(s)", len(tokens))
    return SYNTAX_OK


def check_brace_balance(tokens: List[Token]) -> str:
    """
    Check only that braces balance, using a running counter.

    A '}' that takes the counter below zero, or an open '{' left at the end
    of input, is an error.
    """
    depth = 0
    opened: List[int] = []
    for index, token in enumerate(tokens):
        if token.type != TokenType.BRACE:
            continue
        if token.lexeme == '{':
            depth += 1
            opened.append(index)
        else:
            depth -= 1
            if depth < 0:
                return create_unmatched_brace_error(token, index).message
            opened.pop()

    if depth != 0:
        return create_unclosed_block_error(opened[-1], None, len(tokens)).message
    return SYNTAX_OK
