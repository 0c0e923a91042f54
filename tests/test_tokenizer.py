# tests/test_tokenizer.py

import dataclasses
import unittest

from minilang.parser.error_handler import InvalidCharacterError
from minilang.parser.tokenizer import Tokenizer, scan, tokenize
from minilang.parser.tokens import RESERVED_KINDS, Token, TokenType


class TestTokenizer(unittest.TestCase):
    def kinds(self, text):
        return [t.kind for t in tokenize(text)]

    def test_simple_assignment(self):
        self.assertEqual(tokenize("x = 5"), [
            Token(TokenType.ID, "x"),
            Token(TokenType.ASSIGN, "="),
            Token(TokenType.INTEGER, "5"),
        ])

    def test_all_punctuation(self):
        self.assertEqual(self.kinds("+-*/()=>{}"), [
            TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY, TokenType.DIVIDE,
            TokenType.LPAREN, TokenType.RPAREN, TokenType.ASSIGN,
            TokenType.GREATER_THAN, TokenType.LBRACE, TokenType.RBRACE,
        ])

    def test_keywords_are_exact_and_case_sensitive(self):
        tokens = tokenize("if else iffy Else IF")
        self.assertEqual([t.kind for t in tokens], [
            TokenType.IF, TokenType.ELSE, TokenType.ID, TokenType.ID, TokenType.ID,
        ])
        self.assertEqual([t.text for t in tokens], ["if", "else", "iffy", "Else", "IF"])

    def test_negative_number_is_two_tokens(self):
        self.assertEqual(tokenize("-42"), [
            Token(TokenType.MINUS, "-"),
            Token(TokenType.INTEGER, "42"),
        ])

    def test_maximal_munch(self):
        self.assertEqual(tokenize("abc123def 007 123abc"), [
            Token(TokenType.ID, "abc123def"),
            Token(TokenType.INTEGER, "007"),
            Token(TokenType.INTEGER, "123"),
            Token(TokenType.ID, "abc"),
        ])

    def test_huge_integer_kept_verbatim(self):
        digits = "9" * 40
        self.assertEqual(tokenize(digits), [Token(TokenType.INTEGER, digits)])

    def test_whitespace_discarded(self):
        self.assertEqual(tokenize(" \t\n\n  "), [])
        self.assertEqual(tokenize(""), [])
        self.assertEqual(self.kinds("\tx\n=\n1 "), [
            TokenType.ID, TokenType.ASSIGN, TokenType.INTEGER,
        ])

    def test_invalid_character_raises(self):
        with self.assertRaises(InvalidCharacterError) as cm:
            tokenize("x = 5; y = 6")
        self.assertEqual(cm.exception.char, ";")
        self.assertEqual(str(cm.exception), "Invalid character: ;")

    def test_only_space_tab_newline_are_whitespace(self):
        for ch in "\r\f\v":
            with self.subTest(char=repr(ch)):
                result = scan("x = 1" + ch)
                self.assertFalse(result.ok)
                self.assertEqual(result.tokens, [])
                self.assertEqual(result.error.char, ch)

    def test_non_ascii_letters_rejected(self):
        with self.assertRaises(InvalidCharacterError) as cm:
            tokenize("café = 1")
        self.assertEqual(cm.exception.char, "é")

    def test_scan_returns_error_without_tokens(self):
        result = scan("x = 5 $ y")
        self.assertFalse(result.ok)
        self.assertEqual(result.tokens, [])
        self.assertIsInstance(result.error, InvalidCharacterError)
        self.assertEqual(result.error.char, "$")

    def test_scan_success(self):
        result = scan("if (a > 1) { b = 2 }")
        self.assertTrue(result.ok)
        self.assertIsNone(result.error)
        self.assertEqual(len(result.tokens), 11)

    def test_reserved_kinds_never_scanned(self):
        tokens = tokenize("if (x > 2) { y = -(3 * 4) / 2 } else { y = 5 + 1 }")
        self.assertFalse(any(t.kind in RESERVED_KINDS for t in tokens))
        # square brackets, commas and dots are not part of the alphabet
        for ch in "[],.":
            self.assertFalse(scan(ch).ok)

    def test_tokenizer_class_is_single_use_state(self):
        tokenizer = Tokenizer("a1 b2")
        self.assertEqual(len(tokenizer.tokenize()), 2)
        self.assertEqual(tokenizer.pos, len("a1 b2"))


class TestTokenValues(unittest.TestCase):
    def test_token_kind_enumeration(self):
        self.assertEqual(len(TokenType), 20)
        self.assertEqual(
            RESERVED_KINDS,
            {TokenType.ENDIF, TokenType.THEN, TokenType.LBRACKET,
             TokenType.RBRACKET, TokenType.COMMA, TokenType.DOT},
        )

    def test_token_str(self):
        self.assertEqual(str(Token(TokenType.INTEGER, "5")), "(INTEGER, 5)")
        self.assertEqual(str(Token(TokenType.GREATER_THAN, ">")), "(GREATER_THAN, >)")

    def test_token_is_immutable(self):
        token = Token(TokenType.ID, "x")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.text = "y"


if __name__ == '__main__':
    unittest.main()
