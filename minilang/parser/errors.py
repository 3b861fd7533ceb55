"""
Error handling for the minilang syntax checker.

Each structural rule has a factory here so the wording of a verdict is
defined in one place. Messages always name the token index involved.

Author: minilang developers
"""

from typing import Optional, List

from ..lexer.tokens import Token
from ..lexer.errors import Diagnostic


SYNTAX_ERROR_PREFIX = "Syntax error:"
SYNTAX_OK = "Token order is valid"


class ParseError(Exception):
    """
    Raised when the token stream violates the grammar.

    ``check_syntax`` turns the first one raised into its verdict string.
    """

    def __init__(
        self,
        message: str,
        index: int,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.index = index
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location if token is not None else None,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return self.message


# Syntax error codes for categorization
SYNTAX_ERROR_CODES = {
    "P001": "Missing token",
    "P002": "Unexpected token",
    "P003": "Isolated identifier",
    "P004": "Invalid assignment",
    "P005": "Invalid operand",
    "P006": "Unclosed block",
    "P007": "Unmatched closing brace",
}


def _describe(token: Optional[Token]) -> str:
    return "end of input" if token is None else f"'{token.lexeme}'"


def create_missing_token_error(expected: str, context: str, index: int,
                               found: Optional[Token]) -> ParseError:
    """Create an error for a required token that is absent or wrong."""
    return ParseError(
        message=f"{SYNTAX_ERROR_PREFIX} expected {expected} {context} at position {index}",
        index=index,
        token=found,
        code="P001",
        help_text=f"Found {_describe(found)} instead."
    )


def create_unexpected_token_error(token: Token, index: int) -> ParseError:
    return ParseError(
        message=f"{SYNTAX_ERROR_PREFIX} unexpected token '{token.lexeme}' at position {index}",
        index=index,
        token=token,
        code="P002",
        help_text="Statements start with let, const, var, if, while or an assignment."
    )


def create_isolated_identifier_error(token: Token, index: int) -> ParseError:
    return ParseError(
        message=f"{SYNTAX_ERROR_PREFIX} isolated identifier '{token.lexeme}' at position {index}",
        index=index,
        token=token,
        code="P003",
        help_text="An identifier must be declared, assigned to, or used inside an expression.",
        suggestions=[f"let {token.lexeme};", f"{token.lexeme} = <value>;"]
    )


def create_invalid_assignment_error(token: Token, index: int) -> ParseError:
    return ParseError(
        message=f"{SYNTAX_ERROR_PREFIX} invalid assignment at position {index}",
        index=index,
        token=token,
        code="P004",
        help_text="'=' must come immediately after the identifier being assigned."
    )


def create_invalid_operand_error(operator: Token, index: int, side: str) -> ParseError:
    """Create an error for an operator missing an identifier/number operand."""
    what = "comparison" if operator.is_comparator else "operand"
    return ParseError(
        message=f"{SYNTAX_ERROR_PREFIX} invalid {what} {side} '{operator.lexeme}' at position {index}",
        index=index,
        token=operator,
        code="P005",
        help_text=f"'{operator.lexeme}' needs an identifier or number on both sides."
    )


def create_unclosed_block_error(open_index: int, found: Optional[Token], index: int) -> ParseError:
    return ParseError(
        message=(f"{SYNTAX_ERROR_PREFIX} expected '}}' to close the block opened at position "
                 f"{open_index} (reached position {index})"),
        index=index,
        token=found,
        code="P006",
        help_text="Every '{' needs its own matching '}'."
    )


def create_unmatched_brace_error(token: Optional[Token], index: int) -> ParseError:
    return ParseError(
        message=f"{SYNTAX_ERROR_PREFIX} unmatched '}}' at position {index}",
        index=index,
        token=token,
        code="P007",
        help_text="This '}' closes a block that was never opened."
    )


def create_else_without_if_error(token: Token, index: int) -> ParseError:
    return ParseError(
        message=f"{SYNTAX_ERROR_PREFIX} 'else' without a matching 'if' at position {index}",
        index=index,
        token=token,
        code="P002",
        help_text="'else' must directly follow the closing '}' of an if block."
    )
