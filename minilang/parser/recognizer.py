# minilang/parser/recognizer.py

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from minilang.utils.logging_config import get_logger
from .config import ParserConfig
from .context import ParserContext
from .error_handler import ErrorHandler, ParseError, UnexpectedTokenError, describe_token
from .token_stream import TokenStream
from .tokenizer import scan
from .tokens import Token, TokenType

logger = get_logger(__name__)

# Grammar recognized:
#   program     := statement*
#   statement   := assignment
#                | "if" "(" expression ")" "{" statement "}" ["else" "{" statement "}"]
#   assignment  := ID "=" expression
#   expression  := term (("+" | "-" | ">") term)*
#   term        := factor (("*" | "/") factor)*
#   factor      := INTEGER | ID | "(" expression ")" | "-" factor


@dataclass
class RecognitionResult:
    ok: bool
    error: Optional[ParseError] = None
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    tokens: List[Token] = field(default_factory=list)
    tokens_consumed: int = 0


class Recognizer:
    """
    A predictive recursive descent recognizer.

    Each nonterminal is a method; one token of lookahead decides which
    alternative to take and nothing is ever un-consumed. No tree is built:
    ``parse`` either returns normally (the input is accepted) or raises the
    first hard error.

    Failures inside ``statement`` and ``assignment`` are hard and abort the
    walk. A ``factor`` that matches nothing is soft: it is recorded as a
    warning, consumes nothing, and the walk carries on.
    """

    def __init__(self, tokens: Sequence[Token], context: Optional[ParserContext] = None):
        self.context = context if context else ParserContext()
        self.tokens = TokenStream(tokens)

    def parse(self) -> None:
        logger.debug("Recognizing %d tokens", len(self.tokens))
        while self.tokens.has_more:
            self._statement()
        logger.debug("Accepted after %d tokens", self.tokens.position)

    def _statement(self) -> None:
        token = self.tokens.peek()
        if self.tokens.check(TokenType.ID):
            self._assignment()
        elif self.tokens.match(TokenType.IF):
            self._conditional(token)
        else:
            raise UnexpectedTokenError(token, (TokenType.ID, TokenType.IF))

    def _assignment(self) -> None:
        self._expect(TokenType.ID)
        self._expect(TokenType.ASSIGN)
        self._expression()

    def _conditional(self, if_token: Token) -> None:
        self._delimiter(TokenType.LPAREN)
        self._expression()
        self._delimiter(TokenType.RPAREN)
        self._block(if_token)
        else_token = self.tokens.peek()
        if self.tokens.match(TokenType.ELSE):
            self._block(else_token)

    def _block(self, owner: Token) -> None:
        """A braced body holding exactly one statement."""
        self._delimiter(TokenType.LBRACE)
        with self._nested(owner):
            self._statement()
        self._delimiter(TokenType.RBRACE)

    def _expression(self) -> None:
        self._term()
        while self.tokens.match(TokenType.PLUS, TokenType.MINUS, TokenType.GREATER_THAN):
            self._term()

    def _term(self) -> None:
        self._factor()
        while self.tokens.match(TokenType.MULTIPLY, TokenType.DIVIDE):
            self._factor()

    def _factor(self) -> None:
        token = self.tokens.peek()
        if self.tokens.match(TokenType.INTEGER, TokenType.ID):
            return
        if self.tokens.match(TokenType.LPAREN):
            with self._nested(token):
                self._expression()
            if not self.tokens.match(TokenType.RPAREN) and self.context.config.strict_delimiters:
                self._soft_error(self.tokens.peek())
        elif self.tokens.match(TokenType.MINUS):
            with self._nested(token):
                self._factor()
        else:
            self._soft_error(token)

    def _expect(self, kind: TokenType) -> None:
        if not self.tokens.match(kind):
            raise UnexpectedTokenError(self.tokens.peek(), (kind,))

    def _delimiter(self, kind: TokenType) -> None:
        """Like ``_expect``, but a no-op miss when delimiters are lenient."""
        if self.context.config.strict_delimiters:
            self._expect(kind)
        else:
            self.tokens.match(kind)

    def _soft_error(self, token: Optional[Token]) -> None:
        message = f"Syntax error at token: {describe_token(token)}"
        self.context.error_handler.add_warning(message, token)
        if self.context.config.log_soft_errors:
            logger.warning(message)

    @contextmanager
    def _nested(self, token: Optional[Token]):
        self.context.enter_scope(token)
        try:
            yield
        finally:
            self.context.exit_scope()


def recognize(tokens: Sequence[Token], config: Optional[ParserConfig] = None) -> RecognitionResult:
    """
    Run the recognizer over ``tokens`` without raising on grammar errors.

    Returns:
        A RecognitionResult; ``error`` holds the first hard failure, if any,
        ``errors`` its formatted message from the error handler, and
        ``warnings`` the soft factor failures seen before it.
    """
    context = ParserContext(ErrorHandler(), config if config else ParserConfig())
    recognizer = Recognizer(tokens, context)
    error: Optional[ParseError] = None
    try:
        recognizer.parse()
    except ParseError as e:
        context.error_handler.add_error(e.message, getattr(e, "token", None))
        logger.info("Parsing failed: %s", e)
        error = e

    return RecognitionResult(
        ok=error is None,
        error=error,
        warnings=[msg for msg, _ in context.error_handler.get_warnings()],
        errors=context.error_handler.get_formatted_errors(),
        tokens=list(tokens),
        tokens_consumed=recognizer.tokens.position,
    )


def check_source(text: str, config: Optional[ParserConfig] = None) -> RecognitionResult:
    """Scan ``text`` and recognize the resulting tokens."""
    scanned = scan(text)
    if scanned.error is not None:
        handler = ErrorHandler()
        handler.add_error(scanned.error.message)
        return RecognitionResult(ok=False, error=scanned.error,
                                 errors=handler.get_formatted_errors())
    return recognize(scanned.tokens, config)
