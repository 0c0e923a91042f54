# minilang/parser/tokenizer.py

from dataclasses import dataclass, field
from typing import List, Optional

from minilang.utils.logging_config import get_logger
from .error_handler import InvalidCharacterError
from .tokens import KEYWORDS, PUNCTUATION, Token, TokenType

logger = get_logger(__name__)

WHITESPACE = " \t\n"


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_letter(ch: str) -> bool:
    return 'a' <= ch <= 'z' or 'A' <= ch <= 'Z'


@dataclass
class ScanResult:
    """Outcome of :func:`scan`; ``tokens`` is empty whenever ``error`` is set."""
    tokens: List[Token] = field(default_factory=list)
    error: Optional[InvalidCharacterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Tokenizer:
    """Converts source text into a flat list of tokens."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        text = self.text

        while self.pos < len(text):
            ch = text[self.pos]
            if ch in WHITESPACE:
                self.pos += 1
            elif _is_digit(ch):
                tokens.append(Token(TokenType.INTEGER, self._read_while(_is_digit)))
            elif ch in PUNCTUATION:
                tokens.append(Token(PUNCTUATION[ch], ch))
                self.pos += 1
            elif _is_letter(ch):
                word = self._read_while(lambda c: _is_letter(c) or _is_digit(c))
                tokens.append(Token(KEYWORDS.get(word, TokenType.ID), word))
            else:
                logger.debug("Invalid character: %s", ch)
                raise InvalidCharacterError(ch)

        logger.debug("Scanned %d tokens", len(tokens))
        return tokens

    def _read_while(self, predicate) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]


def tokenize(text: str) -> List[Token]:
    """Scan ``text``, raising :class:`InvalidCharacterError` on a bad character."""
    return Tokenizer(text).tokenize()


def scan(text: str) -> ScanResult:
    """Scan ``text`` and return the tokens or the invalid-character error.

    No partial token list is ever returned.
    """
    try:
        return ScanResult(tokens=tokenize(text))
    except InvalidCharacterError as e:
        return ScanResult(tokens=[], error=e)
