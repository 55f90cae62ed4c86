"""Plotting utilities for distribution figures.

This module provides:
- Automatic style application (matplotlib seaborn style)
- Color palettes for partition maps

Automatically applies styles on import:
    from utils import plotting  # Styles applied!
"""

from .styles import apply_styles
from . import palettes

# Apply styles when module is imported
apply_styles()

__all__ = [
    "apply_styles",
    "palettes",
]
