"""
Circular graph layout.

This module provides a circular layout, usable on its own or as the
secondary layout of ComponentSplitterLayout:
- CircularLayout: Positions nodes evenly on a circle
"""

from .circular import CircularLayout

__all__ = [
    "CircularLayout",
]
