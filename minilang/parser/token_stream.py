# minilang/parser/token_stream.py

from typing import List, Optional, Sequence

from .tokens import Token, TokenType


class TokenStream:
    """
    Token list with a single forward-only cursor.

    The cursor never moves back and never passes the end of the list, which is
    what keeps the recognizer predictive. The underlying list is copied on
    construction and never mutated afterwards.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens: List[Token] = list(tokens)
        self.position = 0

    def peek(self) -> Optional[Token]:
        """Current token, or None at end of stream"""
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def check(self, *kinds: TokenType) -> bool:
        token = self.peek()
        return token is not None and token.kind in kinds

    def match(self, *kinds: TokenType) -> bool:
        """Consume the current token if its kind is one of ``kinds``."""
        if self.check(*kinds):
            self.position += 1
            return True
        return False

    def consume(self) -> Optional[Token]:
        """Consume and return next token"""
        token = self.peek()
        if token is not None:
            self.position += 1
        return token

    @property
    def has_more(self) -> bool:
        """Check if more tokens are available"""
        return self.position < len(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
