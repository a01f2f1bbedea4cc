# utils package

"""
Utilities module for common functionality.
"""

from .logging import setup_logging
from .platform import is_windows, classpath_separator

__all__ = [
    'setup_logging',
    'is_windows',
    'classpath_separator'
]
