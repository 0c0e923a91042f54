# minilang/parser/error_handler.py

from typing import List, Optional, Tuple

from .tokens import Token, TokenType


def describe_token(token: Optional[Token]) -> str:
    """Render a token for diagnostics; ``None`` means the stream is exhausted."""
    return str(token) if token is not None else "end of input"


class ParseError(Exception):
    """Base class for scanning and recognition failures"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCharacterError(ParseError):
    """Raised by the tokenizer on a character outside the alphabet."""
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid character: {char}")


class UnexpectedTokenError(ParseError):
    """Raised by the recognizer when a required token kind is missing."""
    def __init__(self, token: Optional[Token], expected: Tuple[TokenType, ...] = ()):
        self.token = token
        self.expected = tuple(expected)
        super().__init__(f"Syntax error at token: {describe_token(token)}")


class NestingLimitError(ParseError):
    def __init__(self, limit: int, token: Optional[Token] = None):
        self.limit = limit
        self.token = token
        super().__init__(
            f"Maximum nesting level ({limit}) exceeded at token: {describe_token(token)}"
        )


class ErrorHandler:
    """
    Collects the errors and warnings of a single recognition run.

    Hard errors abort the run, so at most one error is ever recorded by the
    recognizer. Warnings come from soft factor failures and can pile up.
    """
    def __init__(self):
        self.errors: List[Tuple[str, Optional[Token]]] = []
        self.warnings: List[Tuple[str, Optional[Token]]] = []

    def add_error(self, message: str, token: Optional[Token] = None) -> None:
        """Add an error with the offending token"""
        self.errors.append((message, token))

    def add_warning(self, message: str, token: Optional[Token] = None) -> None:
        """Add a warning with the offending token"""
        self.warnings.append((message, token))

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def get_warnings(self) -> List[Tuple[str, Optional[Token]]]:
        return self.warnings

    def get_formatted_errors(self) -> List[str]:
        """Get formatted error messages"""
        return [f"Error: {msg}" for msg, _ in self.errors]

    def get_formatted_warnings(self) -> List[str]:
        """Get formatted warning messages"""
        return [f"Warning: {msg}" for msg, _ in self.warnings]
