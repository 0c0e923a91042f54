# minilang/parser/__init__.py

from .tokens import Token, TokenType, RESERVED_KINDS
from .error_handler import (
    ErrorHandler, ParseError, InvalidCharacterError, UnexpectedTokenError, NestingLimitError
)
from .config import ParserConfig
from .context import ParserContext
from .token_stream import TokenStream
from .tokenizer import Tokenizer, ScanResult, scan, tokenize

# Imported after the basic components, the recognizer depends on all of them
from .recognizer import Recognizer, RecognitionResult, recognize, check_source

__all__ = [
    'scan',
    'tokenize',
    'recognize',
    'check_source',
    'Token',
    'TokenType',
    'RESERVED_KINDS',
    'TokenStream',
    'Tokenizer',
    'ScanResult',
    'Recognizer',
    'RecognitionResult',
    'ErrorHandler',
    'ParseError',
    'InvalidCharacterError',
    'UnexpectedTokenError',
    'NestingLimitError',
    'ParserConfig',
    'ParserContext',
]
