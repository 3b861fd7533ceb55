"""
minilang front end

Lexical, syntax and semantic analysis for a minimal scripting language,
with each phase usable on its own.

Architecture:
    minilang/
    ├── lexer/           # Tokenization
    ├── parser/          # Structural (syntax) checks
    ├── analyzer/        # Symbol table, declaration and type checks
    ├── pipeline.py      # Runs the three stages in order
    └── cli.py           # Command line front end

Author: minilang developers
"""

__version__ = "0.1.0"
__author__ = "minilang developers"

from .lexer import Lexer, LexResult, Token, TokenType, tokenize
from .parser import Parser, check_syntax, check_brace_balance, SYNTAX_OK
from .analyzer import SemanticAnalyzer, check_semantics, SEMANTICS_OK
from .config import PipelineConfig
from .pipeline import AnalysisResult, analyze, analyze_file, is_error

__all__ = [
    # Stages
    "tokenize",
    "check_syntax",
    "check_brace_balance",
    "check_semantics",
    "analyze",
    "analyze_file",
    "is_error",

    # Core classes
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "Parser",
    "SemanticAnalyzer",
    "AnalysisResult",
    "PipelineConfig",

    # Verdicts
    "SYNTAX_OK",
    "SEMANTICS_OK",

    "__version__",
    "__author__",
]
