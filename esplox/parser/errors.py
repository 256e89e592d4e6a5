"""
Error handling for the EspLox parser.

Every grammar rule lets ParseError propagate; Parser.parse reports it once
and hands it to the caller. Nothing here ends the process.

Author: xwest
"""

from typing import Optional

from ..diagnostics import Diagnostic
from ..lexer.tokens import Token, TokenKind


class ParseError(Exception):
    """
    Raised when the token stream does not form a valid expression.

    Carries the offending token and a line-tagged diagnostic.
    """

    def __init__(self, message: str, token: Token, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.code = code
        self.diagnostic = Diagnostic(
            line=token.line,
            where=describe_location(token),
            message=message,
        )

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def category(self) -> str:
        """Short description of the error code, "" if there is none."""
        return PARSER_ERROR_CODES.get(self.code, "")

    def __str__(self) -> str:
        return str(self.diagnostic)


# Token kinds that start a statement; synchronization stops in front of them
STATEMENT_KEYWORDS = frozenset({
    TokenKind.CLASS,
    TokenKind.FUN,
    TokenKind.VAR,
    TokenKind.FOR,
    TokenKind.IF,
    TokenKind.WHILE,
    TokenKind.PRINT,
    TokenKind.RETURN,
})


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected token not found",
    "P005": "Expected expression",
    "P010": "Unexpected end of input",
    "P020": "Expression nested too deeply",
}


def describe_location(token: Token) -> str:
    """Context text placed after 'Error' in a parser diagnostic."""
    if token.kind == TokenKind.EOF:
        return " at end of input"
    return f" at '{token.lexeme}'"


# Helper functions for creating common parser errors

def create_expected_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    code = "P010" if found.kind == TokenKind.EOF else "P005"
    return ParseError("expected expression", found, code=code)


def create_expected_token_error(message: str, found: Token) -> ParseError:
    """Create an error for a required token that is missing."""
    code = "P010" if found.kind == TokenKind.EOF else "P001"
    return ParseError(message, found, code=code)


def create_nesting_error(found: Token) -> ParseError:
    """Create an error for prefix operators or parentheses nested past the limit."""
    return ParseError("expression too deeply nested", found, code="P020")
