"""
minilang Semantic Analyzer Package

Implements the symbol-table pass:
- Declaration before use, no redeclaration
- Initialization before use in arithmetic
- Kind compatibility on assignment
- No arithmetic on arrays

Author: minilang developers
"""

from .semantic_analyzer import SemanticAnalyzer, check_semantics
from .symbol_table import SymbolTable, Symbol, SymbolKind
from .errors import SemanticError, SEMANTICS_OK, SEMANTIC_ERROR_PREFIX

__all__ = [
    # Main analyzer
    "SemanticAnalyzer", "check_semantics",

    # Symbol management
    "SymbolTable", "Symbol", "SymbolKind",

    # Error handling
    "SemanticError", "SEMANTICS_OK", "SEMANTIC_ERROR_PREFIX",
]
