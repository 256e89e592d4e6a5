"""
EspLox Lexer Package

Implements the lexical analyzer (tokenizer) for the EspLox language.

Key Features:
- One- and two-character operator disambiguation (! vs !=, < vs <=)
- Line comments, string and number literals
- 16 Spanish reserved words
- Non-fatal, line-tagged error reporting through a diagnostic sink

Author: xwest
"""

from .tokens import Token, TokenKind, KEYWORDS
from .lexer import Lexer, ScanResult, format_tokens, tokenize_string, tokenize_file
from .errors import LexerError

__all__ = [
    "Lexer",
    "ScanResult",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "LexerError",
    "format_tokens",
    "tokenize_string",
    "tokenize_file",
]
