"""
EspLox Recursive Descent Parser

One method per precedence level, loosest first:

    expression  -> equality
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "verdadero" | "falso" | "nada"
                 | "(" expression ")"

Binary levels fold to the left, unary recurses into itself so it nests to
the right. One token of lookahead, no backtracking.

Author: xwest
"""

import logging
from typing import Iterable, List, Optional

from ..diagnostics import DiagnosticSink, default_sink
from ..lexer.tokens import Token, TokenKind
from .ast_nodes import Expression, Literal, Unary, Binary, Grouping
from .errors import (
    ParseError, STATEMENT_KEYWORDS,
    create_expected_expression_error, create_expected_token_error,
    create_nesting_error
)

logger = logging.getLogger(__name__)


EQUALITY_OPERATORS = (TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)
COMPARISON_OPERATORS = (
    TokenKind.GREATER, TokenKind.GREATER_EQUAL,
    TokenKind.LESS, TokenKind.LESS_EQUAL,
)
TERM_OPERATORS = (TokenKind.MINUS, TokenKind.PLUS)
FACTOR_OPERATORS = (TokenKind.SLASH, TokenKind.STAR)
UNARY_OPERATORS = (TokenKind.BANG, TokenKind.MINUS)

# Prefix operators and parentheses each count as one level
MAX_NESTING_DEPTH = 100


class Parser:
    """
    EspLox expression parser.

    Consumes exactly the tokens that make up one expression and returns
    its tree. Anything after the expression is left in place.
    """

    def __init__(self, tokens: Iterable[Token], sink: Optional[DiagnosticSink] = None):
        """
        Initialize parser with a sequence of tokens.

        Args:
            tokens: Tokens from the lexer; an EOF token is appended if missing
            sink: Where diagnostics go; printed to stderr when omitted
        """
        self.tokens: List[Token] = list(tokens)
        if not self.tokens or self.tokens[-1].kind != TokenKind.EOF:
            last_line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenKind.EOF, last_line, ""))

        self.sink = default_sink(sink)
        self.current = 0
        self.depth = 0
        self.errors: List[ParseError] = []

    def parse(self) -> Expression:
        """
        Parse one expression from the token stream.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: If the tokens do not start with a valid expression.
                The error has already been reported through the sink.
        """
        logger.debug("Parsing %d tokens", len(self.tokens))
        self.depth = 0

        try:
            expr = self._expression()
        except ParseError as e:
            self.errors.append(e)
            self.sink.report(e.line, e.diagnostic.where, e.message)
            raise

        logger.debug("Parsed expression using %d of %d tokens",
                     self.current, len(self.tokens))
        return expr

    # Grammar rules, lowest precedence first

    def _expression(self) -> Expression:
        return self._equality()

    def _equality(self) -> Expression:
        expr = self._comparison()

        # Chains like a == b != c fold left
        while self._match(*EQUALITY_OPERATORS):
            operator = self._previous()
            right = self._comparison()
            expr = Binary(expr, operator, right)

        return expr

    def _comparison(self) -> Expression:
        expr = self._term()

        while self._match(*COMPARISON_OPERATORS):
            operator = self._previous()
            right = self._term()
            expr = Binary(expr, operator, right)

        return expr

    def _term(self) -> Expression:
        expr = self._factor()

        while self._match(*TERM_OPERATORS):
            operator = self._previous()
            right = self._factor()
            expr = Binary(expr, operator, right)

        return expr

    def _factor(self) -> Expression:
        expr = self._unary()

        while self._match(*FACTOR_OPERATORS):
            operator = self._previous()
            right = self._unary()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expression:
        if self._match(*UNARY_OPERATORS):
            operator = self._previous()
            self._enter()
            try:
                operand = self._unary()
            finally:
                self.depth -= 1
            return Unary(operator, operand)

        return self._primary()

    def _primary(self) -> Expression:
        if self.peek().is_literal:
            return Literal(self._advance())

        if self._match(TokenKind.LEFT_PAREN):
            self._enter()
            try:
                inner = self._expression()
            finally:
                self.depth -= 1
            self._consume(TokenKind.RIGHT_PAREN, "expected ')' after expression")
            return Grouping(inner)

        raise create_expected_expression_error(self.peek())

    def _enter(self):
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise create_nesting_error(self.peek())

    # Error recovery

    def synchronize(self):
        """
        Discard tokens until a statement boundary.

        Stops just after a ';' or in front of a token that starts a
        statement (objeto, funcion, variable, por, si, mientras, mostrar,
        devolver), or at EOF.
        """
        self._advance()

        while not self.is_at_end():
            if self._previous().kind == TokenKind.SEMICOLON:
                return
            if self.peek().kind in STATEMENT_KEYWORDS:
                return
            self._advance()

    # Utility methods

    def _match(self, *kinds: TokenKind) -> bool:
        """Consume the current token if it is one of `kinds`."""
        for kind in kinds:
            if self._check(kind):
                self._advance()
                return True
        return False

    def _check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def _advance(self) -> Token:
        token = self.peek()
        if not self.is_at_end():
            self.current += 1
        return token

    def _consume(self, kind: TokenKind, message: str) -> Token:
        if self._check(kind):
            return self._advance()
        raise create_expected_token_error(message, self.peek())

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        return self.tokens[self.current]

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenKind.EOF


def parse_string(source: str, filename: str = "<string>",
                 sink: Optional[DiagnosticSink] = None) -> Expression:
    """
    Convenience function to scan and parse a source string.

    Raises:
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename, sink)
    return Parser(tokens, sink).parse()


def parse_file(filepath: str, sink: Optional[DiagnosticSink] = None) -> Expression:
    """
    Convenience function to scan and parse a source file.

    Raises:
        ParseError: If parsing fails
        OSError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath, sink)
    return Parser(tokens, sink).parse()
