"""
Error handling for the minilang lexer.

Provides error reporting with source location information and
learner-friendly help text.

Author: minilang developers
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics reported by any stage (errors, warnings)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


LEXICAL_ERROR_PREFIX = "Lexical error:"


class LexerError(Exception):
    """
    Raised by the scanner when no token rule matches at the cursor.

    The tokenizer catches it and records it in the result, so it never
    reaches callers of ``tokenize``.
    """

    def __init__(
        self,
        message: str,
        character: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.character = character  # Offending text: one character, or a whole bad literal
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def offset(self) -> int:
        return self.diagnostic.location.offset

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return (self.message, self.character, self.offset) == (other.message, other.character, other.offset)

    def __hash__(self) -> int:
        return hash((self.message, self.character, self.offset))


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
    "L003": "Invalid numeric literal",
}

# Common misspellings of operators from other languages
_ALTERNATIVES = {
    '!': ["'==' or '===' for comparisons"],
    '%': ["'/' and '*' (no modulo operator)"],
    '&': ["nested 'if' blocks (no logical operators)"],
    '|': ["nested 'if' blocks (no logical operators)"],
    ':': ["'=' for assignment"],
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    suggestions = _ALTERNATIVES.get(char, [])
    if char in '"\'':
        help_text = f"String literals must be closed with a matching {char} quote."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in minilang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"{LEXICAL_ERROR_PREFIX} unrecognized character '{char}' at position {location.offset}",
        character=char,
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for digits running straight into letters (``123abc``)."""
    return LexerError(
        message=f"{LEXICAL_ERROR_PREFIX} invalid number literal '{lexeme}' at position {location.offset}",
        character=lexeme,
        location=location,
        code="L003",
        help_text="Identifiers cannot start with a digit.",
        suggestions=["Separate the number and the name with an operator or a space",
                     f"Rename it to start with a letter, e.g. _{lexeme}"]
    )
