"""
Test suite for the EspLox lexer.

Tests cover:
- Punctuation and one/two character operators
- Comments, whitespace and line counting
- String and number literals
- Keyword recognition
- Non-fatal error reporting

Author: xwest
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from esplox.diagnostics import CollectingSink
from esplox.lexer import Lexer, Token, TokenKind, KEYWORDS, format_tokens, tokenize_file
from esplox.lexer.errors import LexerError


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def setUp(self):
        """Set up test fixtures."""
        self.sink = CollectingSink()

    def _scan(self, source: str):
        """Helper to tokenize a snippet with a collecting sink."""
        return Lexer(source, sink=self.sink).tokenize()

    def _kinds(self, source: str):
        return [t.kind for t in self._scan(source)]

    def test_empty_input_has_only_eof(self):
        tokens = self._scan("")
        self.assertEqual(tokens, [Token(TokenKind.EOF, 1, "")])
        self.assertFalse(self.sink.has_errors())

    def test_single_character_tokens(self):
        self.assertEqual(self._kinds("(){},.-+;*/"), [
            TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN,
            TokenKind.LEFT_BRACE, TokenKind.RIGHT_BRACE,
            TokenKind.COMMA, TokenKind.DOT, TokenKind.MINUS, TokenKind.PLUS,
            TokenKind.SEMICOLON, TokenKind.STAR, TokenKind.SLASH,
            TokenKind.EOF,
        ])

    def test_one_or_two_character_operators(self):
        self.assertEqual(self._kinds("! != = == < <= > >="), [
            TokenKind.BANG, TokenKind.BANG_EQUAL,
            TokenKind.EQUAL, TokenKind.EQUAL_EQUAL,
            TokenKind.LESS, TokenKind.LESS_EQUAL,
            TokenKind.GREATER, TokenKind.GREATER_EQUAL,
            TokenKind.EOF,
        ])

    def test_operators_without_spaces(self):
        tokens = self._scan("!==<=>")
        self.assertEqual([t.lexeme for t in tokens[:-1]], ["!=", "=", "<=", ">"])

    def test_line_comment_produces_no_tokens(self):
        tokens = self._scan("1 // comentario ( ) \"\n2")
        self.assertEqual([t.kind for t in tokens],
                         [TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.EOF])
        self.assertEqual(tokens[1].line, 2)
        self.assertFalse(self.sink.has_errors())

    def test_comment_at_end_of_input(self):
        self.assertEqual(self._kinds("// solo un comentario"), [TokenKind.EOF])

    def test_whitespace_and_newlines(self):
        tokens = self._scan(" \t\r\n\n  +\n")
        self.assertEqual(tokens[0], Token(TokenKind.PLUS, 3, "+"))
        self.assertEqual(tokens[-1], Token(TokenKind.EOF, 4, ""))

    def test_string_literal_strips_quotes(self):
        tokens = self._scan('"abc"')
        self.assertEqual(tokens, [
            Token(TokenKind.STRING, 1, "abc"),
            Token(TokenKind.EOF, 1, ""),
        ])
        self.assertEqual(tokens[0].value, "abc")

    def test_empty_string(self):
        tokens = self._scan('""')
        self.assertEqual(tokens[0], Token(TokenKind.STRING, 1, ""))

    def test_multiline_string_counts_lines(self):
        tokens = self._scan('"hola\nmundo" 1')
        self.assertEqual(tokens[0].lexeme, "hola\nmundo")
        self.assertEqual(tokens[0].line, 2)
        self.assertEqual(tokens[1].line, 2)

    def test_unterminated_string_is_reported_but_not_fatal(self):
        tokens = self._scan('"abc')
        self.assertEqual(len(self.sink.diagnostics), 1)
        self.assertEqual(self.sink.diagnostics[0].message, "unterminated string")
        self.assertEqual(self.sink.diagnostics[0].line, 1)
        self.assertEqual([t.kind for t in tokens].count(TokenKind.EOF), 1)
        self.assertEqual(tokens[-1].kind, TokenKind.EOF)
        self.assertEqual(tokens[0], Token(TokenKind.STRING, 1, "abc"))

    def test_number_with_fraction(self):
        tokens = self._scan("3.14")
        self.assertEqual(tokens[0], Token(TokenKind.NUMBER, 1, "3.14"))
        self.assertEqual(len(tokens), 2)
        self.assertAlmostEqual(tokens[0].value, 3.14)

    def test_number_with_comma_separator(self):
        tokens = self._scan("3,14")
        self.assertEqual(tokens[0], Token(TokenKind.NUMBER, 1, "3,14"))
        self.assertAlmostEqual(tokens[0].value, 3.14)

    def test_trailing_dot_is_separate_token(self):
        tokens = self._scan("3.")
        self.assertEqual(tokens, [
            Token(TokenKind.NUMBER, 1, "3"),
            Token(TokenKind.DOT, 1, "."),
            Token(TokenKind.EOF, 1, ""),
        ])

    def test_trailing_comma_is_separate_token(self):
        self.assertEqual(self._kinds("7,"), [TokenKind.NUMBER, TokenKind.COMMA, TokenKind.EOF])

    def test_only_one_fractional_separator(self):
        tokens = self._scan("1.2.3")
        self.assertEqual([t.lexeme for t in tokens[:-1]], ["1.2", ".", "3"])

    def test_number_then_identifier(self):
        tokens = self._scan("12abc")
        self.assertEqual(tokens[0], Token(TokenKind.NUMBER, 1, "12"))
        self.assertEqual(tokens[1], Token(TokenKind.IDENTIFIER, 1, "abc"))

    def test_every_keyword(self):
        self.assertEqual(len(KEYWORDS), 16)
        for word, kind in KEYWORDS.items():
            with self.subTest(word=word):
                tokens = self._scan(f"({word})")
                self.assertEqual(tokens[1], Token(kind, 1, word))
                self.assertTrue(tokens[1].is_keyword)

    def test_keywords_are_case_sensitive(self):
        tokens = self._scan("Verdadero SI Nada")
        self.assertTrue(all(t.kind == TokenKind.IDENTIFIER for t in tokens[:-1]))

    def test_keyword_prefix_is_identifier(self):
        for word in ("si1", "yo", "oso", "variables", "nadador", "superior"):
            with self.subTest(word=word):
                tokens = self._scan(word)
                self.assertEqual(tokens[0], Token(TokenKind.IDENTIFIER, 1, word))

    def test_identifiers_allow_unicode_letters(self):
        tokens = self._scan("año canción")
        self.assertEqual([t.lexeme for t in tokens[:-1]], ["año", "canción"])
        self.assertTrue(all(t.kind == TokenKind.IDENTIFIER for t in tokens[:-1]))

    def test_unexpected_character(self):
        tokens = self._scan("1 @ 2")
        self.assertEqual(tokens[1], Token(TokenKind.UNKNOWN, 1, "@"))
        self.assertEqual(tokens[2], Token(TokenKind.NUMBER, 1, "2"))
        self.assertEqual(len(self.sink.diagnostics), 1)
        self.assertEqual(self.sink.diagnostics[0].message, "unexpected character '@'")

    def test_errors_are_reported_with_their_line(self):
        lexer = Lexer("1\n#\n\"sin cerrar", sink=self.sink)
        lexer.tokenize()
        self.assertEqual([d.line for d in self.sink.diagnostics], [2, 3])
        self.assertTrue(lexer.has_errors())
        self.assertEqual(lexer.error_count, 2)
        self.assertIsInstance(lexer.errors[0], LexerError)
        self.assertEqual(lexer.errors[0].code, "L001")
        self.assertEqual(lexer.errors[1].code, "L002")
        self.assertEqual(lexer.errors[0].category, "Unexpected character")
        self.assertEqual(lexer.errors[1].category, "Unterminated string literal")

    def test_underscore_is_not_part_of_identifier(self):
        self.assertEqual(self._kinds("a_b"), [
            TokenKind.IDENTIFIER, TokenKind.UNKNOWN, TokenKind.IDENTIFIER, TokenKind.EOF,
        ])

    def test_lexemes_reconstruct_source(self):
        source = "(a+bb)*c!=d<=e;{f,g}.h-i/j>k"
        tokens = self._scan(source)
        self.assertEqual("".join(t.lexeme for t in tokens), source)

    def test_lexemes_reconstruct_source_without_whitespace(self):
        source = "alfa  ==\n beta // nada\n>= gamma"
        tokens = self._scan(source)
        self.assertEqual("".join(t.lexeme for t in tokens), "alfa==beta>=gamma")

    def test_expression_tokens(self):
        tokens = self._scan("!!verdadero")
        self.assertEqual(tokens, [
            Token(TokenKind.BANG, 1, "!"),
            Token(TokenKind.BANG, 1, "!"),
            Token(TokenKind.TRUE, 1, "verdadero"),
            Token(TokenKind.EOF, 1, ""),
        ])
        self.assertIs(tokens[2].value, True)
        self.assertTrue(tokens[2].is_literal)
        self.assertFalse(tokens[0].is_literal)

    def test_tokenize_resets_state(self):
        lexer = Lexer("1 @", sink=self.sink)
        first = list(lexer.tokenize())
        second = lexer.tokenize()
        self.assertEqual(first, second)
        self.assertEqual(lexer.error_count, 1)

    def test_transfer_hands_off_tokens_and_source(self):
        lexer = Lexer("1 + 2", sink=self.sink)
        tokens, source = lexer.transfer()
        self.assertEqual(source, "1 + 2")
        self.assertEqual([t.kind for t in tokens],
                         [TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER, TokenKind.EOF])
        self.assertEqual(lexer.tokens, [])

    def test_second_transfer_rescans(self):
        lexer = Lexer("1 + 2", sink=self.sink)
        first, _ = lexer.transfer()
        second, source = lexer.transfer()
        self.assertEqual(second, first)
        self.assertIsNot(second, first)
        self.assertEqual(second[-1].kind, TokenKind.EOF)
        self.assertEqual(source, "1 + 2")

    def test_transfer_after_tokenize_does_not_rescan(self):
        lexer = Lexer("@", sink=self.sink)
        tokens = lexer.tokenize()
        handed_off, _ = lexer.transfer()
        self.assertIs(handed_off, tokens)
        self.assertEqual(len(self.sink.diagnostics), 1)

    def test_format_tokens(self):
        listing = format_tokens(self._scan("si\n1"))
        self.assertEqual(listing.splitlines(), [
            "Token: si | Type: IF | Line: 1",
            "Token: 1 | Type: NUMBER | Line: 2",
            "Token:  | Type: EOF | Line: 2",
        ])

    def test_tokenize_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".esp", delete=False, encoding="utf-8") as f:
            f.write("mostrar \"hola\"\n")
            path = f.name
        try:
            tokens = tokenize_file(path, sink=self.sink)
        finally:
            os.unlink(path)
        self.assertEqual([t.kind for t in tokens],
                         [TokenKind.PRINT, TokenKind.STRING, TokenKind.EOF])

    def test_token_is_immutable(self):
        token = Token(TokenKind.NUMBER, 1, "1")
        with self.assertRaises(AttributeError):
            token.lexeme = "2"


if __name__ == '__main__':
    unittest.main()
