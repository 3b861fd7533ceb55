"""
Semantic analyzer for minilang.

A single forward pass over the token list that builds a symbol table and
checks:
- declaration before use and no redeclaration
- initialization before use in arithmetic
- kind compatibility across '='
- no arithmetic on arrays

It does not rely on the syntax checker having run; neighbours that fall
outside the token list are treated as absent.

Author: minilang developers
"""

import logging
from typing import List, Optional

from ..lexer.tokens import Token, TokenType
from .symbol_table import SymbolTable, Symbol, SymbolKind
from .errors import (
    SemanticError, SEMANTICS_OK, create_undeclared_error,
    create_uninitialized_error, create_type_mismatch_error,
    create_array_arithmetic_error
)

logger = logging.getLogger(__name__)


class SemanticAnalyzer:
    """
    Symbol-table driven checker.

    Each call to ``analyze`` starts from an empty table, so one instance
    can be reused without results leaking between runs.
    """

    def __init__(self):
        self.symbol_table = SymbolTable()
        self.tokens: List[Token] = []

    def analyze(self, tokens: List[Token]) -> str:
        """
        Run the pass over ``tokens``.

        Returns:
            SEMANTICS_OK, or the message of the first violation found
        """
        self.symbol_table = SymbolTable()
        self.tokens = tokens

        try:
            for index, token in enumerate(tokens):
                if token.is_declaration_keyword:
                    self._declare(index)
                elif token.type == TokenType.ASSIGN:
                    self._check_assignment(index)
                elif token.is_arithmetic_operator:
                    self._check_arithmetic(index)
        except SemanticError as e:
            logger.debug("semantic check failed: %s", e.message)
            return e.message

        logger.debug("semantic check passed, %d symbol(s)", len(self.symbol_table))
        return SEMANTICS_OK

    def _declare(self, keyword_index: int):
        """Register every declarator of the declaration starting at keyword_index."""
        keyword = self.tokens[keyword_index]
        index = keyword_index + 1

        while True:
            target = self._at(index)
            if target is None or not target.is_identifier:
                return
            self.symbol_table.define(target, index, self._declared_kind(keyword, index))

            # Skip to the next declarator in a comma list, if any
            index += 1
            while self._at(index) is not None and not self._at(index).is_punct(',') \
                    and not self._ends_declaration(self._at(index)):
                index += 1
            if self._at(index) is None or not self._at(index).is_punct(','):
                return
            index += 1

    def _declared_kind(self, keyword: Token, name_index: int) -> SymbolKind:
        following = self._at(name_index + 1)
        if following is not None and following.is_punct('['):
            return SymbolKind.ARRAY

        initializer = self._at(name_index + 2)
        if initializer is not None and following.is_punct('=') and initializer.is_number:
            return SymbolKind.NUMBER

        return SymbolKind(keyword.lexeme)

    @staticmethod
    def _ends_declaration(token: Token) -> bool:
        return token.type in (TokenType.SEMICOLON, TokenType.KEYWORD, TokenType.BRACE)

    def _check_assignment(self, index: int):
        left = self._at(index - 1)
        left_symbol: Optional[Symbol] = None
        if left is not None and left.is_identifier:
            left_symbol = self._require_declared(left, index - 1)
            self.symbol_table.mark_initialized(left.lexeme)

        right = self._at(index + 1)
        if right is not None and right.is_identifier:
            right_symbol = self._require_declared(right, index + 1)
            if left_symbol is not None and left_symbol.kind != right_symbol.kind:
                raise create_type_mismatch_error(
                    left, str(left_symbol.kind), right, str(right_symbol.kind), index
                )

    def _check_arithmetic(self, index: int):
        operator = self.tokens[index]
        for operand_index in (index - 1, index + 1):
            operand = self._at(operand_index)
            if operand is None or not operand.is_identifier:
                continue
            symbol = self._require_declared(operand, operand_index)
            if symbol.kind == SymbolKind.ARRAY:
                raise create_array_arithmetic_error(operator, index)
            if not symbol.initialized:
                raise create_uninitialized_error(operand, operand_index)

    def _require_declared(self, token: Token, index: int) -> Symbol:
        symbol = self.symbol_table.lookup(token.lexeme)
        if symbol is None:
            raise create_undeclared_error(token, index)
        return symbol

    def _at(self, index: int) -> Optional[Token]:
        """Token at index, or None when out of range."""
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None


def check_semantics(tokens: List[Token]) -> str:
    """Run the semantic pass over ``tokens`` with a fresh analyzer."""
    return SemanticAnalyzer().analyze(tokens)
