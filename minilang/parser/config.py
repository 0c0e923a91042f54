from dataclasses import dataclass, field
from typing import Dict, Any

@dataclass
class ParserConfig:
    """Configuration for recognizer behavior"""
    strict_delimiters: bool = True
    max_nesting_level: int = 200
    log_soft_errors: bool = True
    custom_settings: Dict[str, Any] = field(default_factory=dict)

    def get_setting(self, key: str, default=None):
        return self.custom_settings.get(key, default)
