"""
Box packing for component drawings.

This module provides packers that place the bounding boxes of laid-out
components without overlap:
- Packer: Abstract interface
- TileToRowsPacker: Row-based packing toward a target aspect ratio
"""

from .base import Packer
from .tile_to_rows import TileToRowsPacker

__all__ = [
    "Packer",
    "TileToRowsPacker",
]
