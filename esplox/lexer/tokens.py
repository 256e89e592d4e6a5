"""
Token definitions for the EspLox lexer.

This module defines all token kinds supported by EspLox:
- Single-character punctuation
- One or two character operators
- Literals (identifiers, strings, numbers)
- The 16 reserved keywords (spelled in Spanish)
- End-of-input and unknown-character markers

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


class TokenKind(Enum):
    """
    Enumeration of all token kinds in EspLox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # nombre, año, x1
    STRING = auto()                 # "hola"
    NUMBER = auto()                 # 42, 3.14, 3,14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()                    # y
    CLASS = auto()                  # objeto
    ELSE = auto()                   # sino
    FALSE = auto()                  # falso
    FUN = auto()                    # funcion
    FOR = auto()                    # por
    IF = auto()                     # si
    NULL = auto()                   # nada
    OR = auto()                     # o
    PRINT = auto()                  # mostrar
    RETURN = auto()                 # devolver
    SUPER = auto()                  # super
    THIS = auto()                   # este
    TRUE = auto()                   # verdadero
    VAR = auto()                    # variable
    WHILE = auto()                  # mientras

    # ========================================================================
    # Special tokens
    # ========================================================================
    EOF = auto()                    # End of input
    UNKNOWN = auto()                # Unrecognized character


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the EspLox language.

    `lexeme` is the raw source slice, except for strings where it is the
    text between the quotes.
    """
    kind: TokenKind
    line: int
    lexeme: str

    def __str__(self) -> str:
        return f"Token: {self.lexeme} | Type: {self.kind.name} | Line: {self.line}"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.line}, {self.lexeme!r})"

    @property
    def value(self) -> Any:
        """Semantic value of a literal token, None for everything else."""
        if self.kind == TokenKind.NUMBER:
            return float(self.lexeme.replace(",", "."))
        if self.kind == TokenKind.STRING:
            return self.lexeme
        if self.kind in (TokenKind.TRUE, TokenKind.FALSE):
            return self.kind == TokenKind.TRUE
        return None

    @property
    def is_literal(self) -> bool:
        """Check if this token can stand as a literal expression."""
        return self.kind in LITERAL_KINDS

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.kind in KEYWORD_KINDS


# Lookup tables used by the lexer. Read-only so no caller can grow the
# reserved word set at runtime.

KEYWORDS = MappingProxyType({
    "y": TokenKind.AND,
    "objeto": TokenKind.CLASS,
    "sino": TokenKind.ELSE,
    "falso": TokenKind.FALSE,
    "por": TokenKind.FOR,
    "funcion": TokenKind.FUN,
    "si": TokenKind.IF,
    "nada": TokenKind.NULL,
    "o": TokenKind.OR,
    "mostrar": TokenKind.PRINT,
    "devolver": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "este": TokenKind.THIS,
    "verdadero": TokenKind.TRUE,
    "variable": TokenKind.VAR,
    "mientras": TokenKind.WHILE,
})

KEYWORD_KINDS = frozenset(KEYWORDS.values())

SINGLE_CHAR_TOKENS = MappingProxyType({
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
})

# Operators that become a two-character token when followed by '='
ONE_OR_TWO_CHAR_TOKENS = MappingProxyType({
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
})

LITERAL_KINDS = frozenset({
    TokenKind.FALSE,
    TokenKind.TRUE,
    TokenKind.NULL,
    TokenKind.NUMBER,
    TokenKind.STRING,
})
