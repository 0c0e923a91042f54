# minilang/__init__.py

from .parser import *

__version__ = "0.1.0"

__all__ = parser.__all__
