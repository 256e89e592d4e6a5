"""
EspLox Lexer - turns source text into tokens

Single pass, one character of lookahead (two for the fractional part of a
number). Errors are reported as they are found and never stop the scan,
so the caller always gets a complete token list ending in EOF.

xwest
"""

import logging
from typing import List, NamedTuple, Optional

from ..diagnostics import DiagnosticSink, default_sink
from .tokens import Token, TokenKind, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
from .errors import (
    LexerError, create_unexpected_character_error, create_unterminated_string_error
)

logger = logging.getLogger(__name__)


class ScanResult(NamedTuple):
    """Tokens and the text they were scanned from, handed off together."""
    tokens: List[Token]
    source: str


def _is_digit(char: str) -> bool:
    return char != "" and "0" <= char <= "9"


class Lexer:
    """
    EspLox lexical analyzer.

    Converts source code text into a list of tokens. Comments and
    whitespace are dropped, keywords are recognised after an identifier
    has been read in full.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 sink: Optional[DiagnosticSink] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file, used in log messages
            sink: Where diagnostics go; printed to stderr when omitted
        """
        self.source = source
        self.filename = filename
        self.sink = default_sink(sink)
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self._scanned = False

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, always ending with exactly one EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenKind.EOF, self.line, ""))
        self._scanned = True

        logger.debug("Scanned %d tokens from %s (%d errors)",
                     len(self.tokens), self.filename, len(self.errors))
        return self.tokens

    def transfer(self) -> ScanResult:
        """
        Hand the scanned tokens and the source text over to the caller.

        Scans first if tokenize() has not been called since the last
        hand-off, so every result ends with its own EOF token. The lexer
        keeps no reference to the returned token list.
        """
        if not self._scanned:
            self.tokenize()
        result = ScanResult(self.tokens, self.source)
        self.tokens = []
        self._scanned = False
        return result

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # Line comment runs up to, not including, the newline
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenKind.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._tokenize_string()
        elif _is_digit(char):
            self._tokenize_number()
        elif char.isalpha():
            self._tokenize_identifier_or_keyword()
        else:
            self._add_token(TokenKind.UNKNOWN)
            self._error(create_unexpected_character_error(char, self.line))

    def _tokenize_string(self):
        """Tokenize a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error(create_unterminated_string_error(self.line))
            content = self.source[self.start + 1:self.current]
        else:
            self._advance()  # Closing quote
            content = self.source[self.start + 1:self.current - 1]

        self.tokens.append(Token(TokenKind.STRING, self.line, content))

    def _tokenize_number(self):
        """Tokenize a number: digits, optionally '.' or ',' and more digits."""
        while _is_digit(self._peek()):
            self._advance()

        # A separator only counts when a digit follows it
        if self._peek() in (".", ",") and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenKind.NUMBER)

    def _tokenize_identifier_or_keyword(self):
        while self._peek().isalnum():
            self._advance()

        lexeme = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(lexeme, TokenKind.IDENTIFIER))

    def _add_token(self, kind: TokenKind):
        self.tokens.append(Token(kind, self.line, self.source[self.start:self.current]))

    def _error(self, error: LexerError):
        self.errors.append(error)
        self.sink.report(error.line, "", error.message)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is `expected`."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        """Current character without consuming it, "" at end of input."""
        if self._is_at_end():
            return ""
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def has_errors(self) -> bool:
        """Check if the last scan reported any errors."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        return len(self.errors)


def format_tokens(tokens: List[Token]) -> str:
    """Render one listing line per token."""
    return "\n".join(str(token) for token in tokens)


def tokenize_string(source: str, filename: str = "<string>",
                    sink: Optional[DiagnosticSink] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for log messages
        sink: Diagnostic sink, stderr when omitted

    Returns:
        List of tokens ending with EOF; problems are reported, never raised
    """
    return Lexer(source, filename, sink).tokenize()


def tokenize_file(filepath: str, sink: Optional[DiagnosticSink] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    return tokenize_string(source, filepath, sink)
