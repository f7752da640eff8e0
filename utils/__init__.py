# utils package

"""
Utilities module for logging and terminal colors.
"""

from .logging import setup_logging
from .colors import Colors, colorize

__all__ = [
    'setup_logging',
    'Colors',
    'colorize'
]
