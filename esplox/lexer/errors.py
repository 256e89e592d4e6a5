"""
Error handling for the EspLox lexer.

Lexical errors never stop scanning. Each one is built as a LexerError,
reported through the diagnostic sink, stored on the lexer, and scanning
carries on with the next character.

Author: xwest
"""

from typing import Optional

from ..diagnostics import Diagnostic


class LexerError(Exception):
    """
    A recoverable lexical error.

    Contains the line-tagged diagnostic and an error code for categorization.
    """

    def __init__(self, message: str, line: int, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.code = code
        self.diagnostic = Diagnostic(line=line, where="", message=message)

    @property
    def category(self) -> str:
        return ERROR_CODES.get(self.code, "")

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


# Helper functions for creating common errors

def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character no token can start with."""
    if char.isprintable():
        message = f"unexpected character '{char}'"
    else:
        message = f"unexpected character U+{ord(char):04X}"
    return LexerError(message, line, code="L001")


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that runs to end of input."""
    return LexerError("unterminated string", line, code="L002")
