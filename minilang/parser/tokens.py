# minilang/parser/tokens.py

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Closed set of token kinds for the language."""
    INTEGER = "INTEGER"
    PLUS = "PLUS"
    MINUS = "MINUS"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    ASSIGN = "ASSIGN"
    ID = "ID"
    IF = "IF"
    ELSE = "ELSE"
    ENDIF = "ENDIF"                 # reserved, never scanned
    THEN = "THEN"                   # reserved, never scanned
    GREATER_THAN = "GREATER_THAN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"           # reserved, never scanned
    RBRACKET = "RBRACKET"           # reserved, never scanned
    COMMA = "COMMA"                 # reserved, never scanned
    DOT = "DOT"                     # reserved, never scanned


# Single-character punctuation recognized by the tokenizer.
PUNCTUATION = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MULTIPLY,
    '/': TokenType.DIVIDE,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '=': TokenType.ASSIGN,
    '>': TokenType.GREATER_THAN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
}

KEYWORDS = {
    'if': TokenType.IF,
    'else': TokenType.ELSE,
}

# Kinds that exist in the vocabulary but are never produced by the tokenizer.
RESERVED_KINDS = frozenset({
    TokenType.ENDIF,
    TokenType.THEN,
    TokenType.LBRACKET,
    TokenType.RBRACKET,
    TokenType.COMMA,
    TokenType.DOT,
})


@dataclass(frozen=True)
class Token:
    kind: TokenType
    text: str

    def __str__(self) -> str:
        return f"({self.kind.value}, {self.text})"
