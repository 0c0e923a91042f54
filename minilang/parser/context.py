# minilang/parser/context.py

from dataclasses import dataclass, field
from typing import Optional

from .config import ParserConfig
from .error_handler import ErrorHandler, NestingLimitError
from .tokens import Token


@dataclass
class ParserContext:
    """Per-run state shared by the grammar rules of one recognizer"""

    error_handler: ErrorHandler = field(default_factory=ErrorHandler)
    config: ParserConfig = field(default_factory=ParserConfig)
    nesting_level: int = 0

    def enter_scope(self, token: Optional[Token] = None):
        """Enter a new nesting level"""
        self.nesting_level += 1
        if self.nesting_level > self.config.max_nesting_level:
            raise NestingLimitError(self.config.max_nesting_level, token)

    def exit_scope(self):
        """Exit current nesting level"""
        self.nesting_level -= 1
