"""
Packer interface.

A packer places a set of integer boxes without overlap, trying to keep the
bounding rectangle of the result close to a target aspect ratio.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..geometry import IPoint


class Packer(ABC):
    """
    Abstract base class for box packers.

    Subclasses implement pack(). The offset returned for box i is the
    position of its top-left corner; no two boxes placed at their offsets
    may overlap.
    """

    @abstractmethod
    def pack(self, boxes: Sequence[IPoint], target_ratio: float = 1.0) -> list[IPoint]:
        """
        Place boxes.

        Args:
            boxes: Box extents (width, height)
            target_ratio: Desired width / height of the packing

        Returns:
            One offset per box, in input order
        """
        pass


__all__ = ["Packer"]
