"""
Symbol table for minilang semantic analysis.

The table is flat (one global scope) and lives for a single analysis
run; it is never shared between runs.

Author: minilang developers
"""

from typing import Dict, Iterator, Optional
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token
from .errors import create_redeclaration_error


class SymbolKind(Enum):
    """Declared kind of a variable."""
    LET = "let"
    CONST = "const"
    VAR = "var"
    ARRAY = "array"
    NUMBER = "number"

    def __str__(self) -> str:
        return self.value


@dataclass
class Symbol:
    """A declared variable."""
    name: str
    kind: SymbolKind
    declared_at: int  # Token index of the declaration target
    initialized: bool = False

    def __str__(self) -> str:
        state = "initialized" if self.initialized else "uninitialized"
        return f"{self.name}: {self.kind} ({state})"


class SymbolTable:
    """Mapping from identifier name to Symbol."""

    def __init__(self):
        self.symbols: Dict[str, Symbol] = {}

    def define(self, token: Token, index: int, kind: SymbolKind) -> Symbol:
        """Define a symbol, raising SemanticError if the name already exists."""
        existing = self.symbols.get(token.lexeme)
        if existing is not None:
            raise create_redeclaration_error(token, index, existing.declared_at)

        symbol = Symbol(name=token.lexeme, kind=kind, declared_at=index)
        self.symbols[symbol.name] = symbol
        return symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        return self.symbols.get(name)

    def mark_initialized(self, name: str):
        self.symbols[name].initialized = True

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols.values())

    def __len__(self) -> int:
        return len(self.symbols)
