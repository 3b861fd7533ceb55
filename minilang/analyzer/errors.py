"""
Semantic analysis error handling for minilang.

Covers declaration, initialization and type/kind errors. Every message
names the variable (or kinds) involved and the token index.

Author: minilang developers
"""

from typing import Optional, List

from ..lexer.tokens import Token
from ..lexer.errors import Diagnostic


SEMANTIC_ERROR_PREFIX = "Semantic error:"
SEMANTICS_OK = "All variable types are correct"


class SemanticError(Exception):
    """
    Raised when the semantic pass finds a violation.

    Carries the token index and a Diagnostic for rich rendering.
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


# Semantic error codes for categorization
SEMANTIC_ERROR_CODES = {
    "S001": "Type mismatch",
    "S002": "Arithmetic on array",
    "S010": "Undeclared variable",
    "S011": "Redeclaration",
    "S020": "Use before initialization",
}


def create_redeclaration_error(token: Token, index: int, first_index: int) -> SemanticError:
    return SemanticError(
        message=(f"{SEMANTIC_ERROR_PREFIX} redeclaration of variable '{token.lexeme}' at position "
                 f"{index} (first declared at position {first_index})"),
        index=index,
        token=token,
        code="S011",
        help_text="A variable can only be declared once; assign to it instead.",
        suggestions=[f"{token.lexeme} = <value>;"]
    )


def create_undeclared_error(token: Token, index: int) -> SemanticError:
    return SemanticError(
        message=f"{SEMANTIC_ERROR_PREFIX} variable '{token.lexeme}' is not declared (position {index})",
        index=index,
        token=token,
        code="S010",
        help_text="Declare the variable with let, const or var before using it.",
        suggestions=[f"let {token.lexeme};"]
    )


def create_uninitialized_error(token: Token, index: int) -> SemanticError:
    return SemanticError(
        message=(f"{SEMANTIC_ERROR_PREFIX} variable '{token.lexeme}' is used before "
                 f"initialization (position {index})"),
        index=index,
        token=token,
        code="S020",
        help_text=f"Assign a value to '{token.lexeme}' before using it in arithmetic."
    )


def create_type_mismatch_error(left: Token, left_kind: str, right: Token, right_kind: str,
                               index: int) -> SemanticError:
    return SemanticError(
        message=(f"{SEMANTIC_ERROR_PREFIX} type mismatch: cannot assign '{right.lexeme}' ({right_kind}) "
                 f"to '{left.lexeme}' ({left_kind}) at position {index}"),
        index=index,
        token=left,
        code="S001"
    )


def create_array_arithmetic_error(operator: Token, index: int) -> SemanticError:
    return SemanticError(
        message=(f"{SEMANTIC_ERROR_PREFIX} cannot perform arithmetic on arrays "
                 f"('{operator.lexeme}' at position {index})"),
        index=index,
        token=operator,
        code="S002"
    )
