"""
Core module for the BuildKit provider.

This module provides the foundational components used throughout the package:
- Exception classes for lifecycle and config source errors
- Enum definitions for capability categories and diagnostics
"""

from .exceptions import *
from .enums import *

__all__ = []

from .exceptions import __all__ as exceptions_all
from .enums import __all__ as enums_all

__all__.extend(exceptions_all)
__all__.extend(enums_all)
