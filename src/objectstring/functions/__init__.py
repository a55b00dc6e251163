"""
Generic helpers for string processing.

This module provides functions for chaining text operations, performing
ordered literal replacements, and incrementing strings.
"""

from .functions import __all__
from .functions import *

__all__ = __all__
