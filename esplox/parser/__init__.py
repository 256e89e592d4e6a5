"""
EspLox Parser Package

Recursive descent parser that turns a token list into a single expression
tree.

Key Features:
- Fixed precedence ladder: equality, comparison, term, factor, unary, primary
- Left-associative binary operators, right-nesting unary operators
- Typed, caller-visible parse failures
- Statement-boundary synchronization primitive for error recovery

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, Expression, Literal, Unary, Binary, Grouping
)
from .parser import Parser, parse_string, parse_file
from .errors import ParseError, STATEMENT_KEYWORDS
from .printer import ASTPrinter

__all__ = [
    # Core parser
    "Parser",
    "parse_string",
    "parse_file",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "Expression",
    "Literal", "Unary", "Binary", "Grouping",
    "ASTPrinter",

    # Error handling
    "ParseError", "STATEMENT_KEYWORDS",
]
