"""
minilang Parser Package

Implements the syntax checker: a recursive-descent walk over the flat
token list that reports the first structural violation.

Key Features:
- Declarations with comma lists, array sizes and initial values
- if/while headers with a fixed comparison shape and balanced blocks
- Assignments and flat arithmetic values
- Standalone brace-balance check

Author: minilang developers
"""

from .parser import Parser, check_syntax, check_brace_balance
from .errors import ParseError, SYNTAX_OK, SYNTAX_ERROR_PREFIX

__all__ = [
    "Parser",
    "check_syntax",
    "check_brace_balance",
    "ParseError",
    "SYNTAX_OK",
    "SYNTAX_ERROR_PREFIX",
]
