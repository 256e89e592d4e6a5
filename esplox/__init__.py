"""
EspLox Front End Package

Lexer and recursive-descent expression parser for EspLox, a small scripting
language with Spanish keywords.

Architecture:
    esplox/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Expression parsing, AST nodes, tree printer
    ├── diagnostics.py   # Line-tagged diagnostic sinks
    └── cli.py           # File runner and interactive prompt

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .diagnostics import Diagnostic, CollectingSink, CallbackSink, PrintingSink
from .lexer import Lexer, Token, TokenKind
from .parser import Parser, ParseError

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "ParseError",

    # Diagnostics
    "Diagnostic",
    "CollectingSink",
    "CallbackSink",
    "PrintingSink",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
