"""
Token definitions for the minilang lexer.

Defines the token kinds recognised by the tokenizer and the ordered rule
table that drives it:
- Keywords (let, const, var, if, else, while)
- Identifiers and numeric / string literals
- Assignment, arithmetic operators and comparators
- Punctuation (semicolon, comma, brackets, braces, parentheses)

Author: minilang developers
"""

import re
from enum import Enum
from dataclasses import dataclass
from typing import List, Tuple


class TokenType(Enum):
    """
    Enumeration of all token kinds in minilang.

    The value of each member is the label shown to learners when a token
    list is rendered.
    """

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    ASSIGN = "assignment"
    OPERATOR = "operator"
    COMPARATOR = "comparator"
    SEMICOLON = "semicolon"
    COMMA = "comma"
    BRACKET = "bracket"
    BRACE = "brace"
    PAREN = "parenthesis"
    STRING = "string literal"

    @property
    def label(self) -> str:
        return self.value


# Keyword groups
DECLARATION_KEYWORDS = frozenset({"let", "const", "var"})
CONDITIONAL_KEYWORDS = frozenset({"if", "while"})
KEYWORDS = DECLARATION_KEYWORDS | CONDITIONAL_KEYWORDS | {"else"}

# Operator groups
ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/"})
COMPARATORS = frozenset({"===", "==", ">=", "<=", ">", "<"})

# The digit run is captured inside a lookahead so it is matched once and
# never shortened to make the trailing (?!\w) succeed.
NUMBER_PATTERN = re.compile(r'(?=(?P<digits>\d+(?:\.\d+)?|\.\d+))(?P=digits)(?!\w)', re.ASCII)

# A digit run glued to letters, e.g. 123abc. Reported as one bad literal.
MALFORMED_NUMBER_PATTERN = re.compile(r'(?:\d+(?:\.\d+)?|\.\d+)\w+', re.ASCII)

# Ordered (pattern, kind) rules. The first rule matching at the cursor wins,
# so keywords must precede identifiers and comparators must precede '='.
TOKEN_RULES: List[Tuple[re.Pattern, TokenType]] = [
    (re.compile(r'\b(?:let|const|var|if|else|while)\b', re.ASCII), TokenType.KEYWORD),
    (re.compile(r'[A-Za-z_]\w*', re.ASCII), TokenType.IDENTIFIER),
    (NUMBER_PATTERN, TokenType.NUMBER),
    (re.compile(r'===|==|>=|<=|>|<'), TokenType.COMPARATOR),
    (re.compile(r'='), TokenType.ASSIGN),
    (re.compile(r'[+\-*/]'), TokenType.OPERATOR),
    (re.compile(r';'), TokenType.SEMICOLON),
    (re.compile(r','), TokenType.COMMA),
    (re.compile(r'[\[\]]'), TokenType.BRACKET),
    (re.compile(r'[{}]'), TokenType.BRACE),
    (re.compile(r'[()]'), TokenType.PAREN),
    (re.compile(r'"[^"]*"|\'[^\']*\''), TokenType.STRING),
]


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for rendering token tables.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in minilang.

    Tokens are immutable; their order in the token list is the only
    structure later stages rely on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"

    @property
    def offset(self) -> int:
        return self.location.offset

    @property
    def is_keyword(self) -> bool:
        return self.type == TokenType.KEYWORD

    @property
    def is_declaration_keyword(self) -> bool:
        """Check if this token starts a declaration (let/const/var)."""
        return self.type == TokenType.KEYWORD and self.lexeme in DECLARATION_KEYWORDS

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def is_number(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.type == TokenType.NUMBER or bool(NUMBER_PATTERN.fullmatch(self.lexeme))

    @property
    def is_operand(self) -> bool:
        """Identifiers and numbers are the only valid arithmetic/comparison operands."""
        return self.type in (TokenType.IDENTIFIER, TokenType.NUMBER)

    @property
    def is_arithmetic_operator(self) -> bool:
        return self.type == TokenType.OPERATOR and self.lexeme in ARITHMETIC_OPERATORS

    @property
    def is_comparator(self) -> bool:
        return self.type == TokenType.COMPARATOR

    def is_punct(self, text: str) -> bool:
        """Check if this token is the given punctuation / keyword text."""
        return self.lexeme == text and self.type != TokenType.STRING
