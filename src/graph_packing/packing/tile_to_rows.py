"""
Row-based box packer.

Boxes are taken in order of decreasing height and appended to rows. Each
box goes to the row (or a new row below the others) that keeps the packing
smallest once scaled to the target aspect ratio.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..geometry import IPoint
from ..validation import validate_target_ratio
from .base import Packer


@dataclass
class _Row:
    """A row of boxes, filled left to right."""

    width: int = 0
    max_height: int = 0
    boxes: list[int] = field(default_factory=list)


class TileToRowsPacker(Packer):
    """
    Pack boxes into rows, approximating a target aspect ratio.

    The cost of a W x H packing for target ratio r is the area of the
    smallest rectangle of ratio r that contains it, max(W^2 / r, r * H^2).
    For r = 0 only the width counts, so every box gets a row of its own.

    Example:
        packer = TileToRowsPacker()
        offsets = packer.pack([IPoint(40, 40), IPoint(31, 31)], target_ratio=1.0)
    """

    def pack(self, boxes: Sequence[IPoint], target_ratio: float = 1.0) -> list[IPoint]:
        """
        Place boxes in rows.

        Args:
            boxes: Box extents (width, height)
            target_ratio: Desired width / height of the packing

        Returns:
            One offset per box, in input order

        Raises:
            InvalidRatioError: If target_ratio is negative or not finite
        """
        ratio = validate_target_ratio(target_ratio)
        n = len(boxes)
        if n == 0:
            return []

        # Stable sort keeps input order among boxes of equal height
        order = sorted(range(n), key=lambda i: -boxes[i].y)

        rows: list[_Row] = []
        for i in order:
            box = boxes[i]
            best = self._find_best_row(rows, box, ratio)
            if best == len(rows):
                rows.append(_Row())
            row = rows[best]
            row.boxes.append(i)
            row.width += box.x
            row.max_height = max(row.max_height, box.y)

        offsets = [IPoint(0, 0)] * n
        y = 0
        for row in rows:
            x = 0
            for i in row.boxes:
                offsets[i] = IPoint(x, y)
                x += boxes[i].x
            y += row.max_height
        return offsets

    @staticmethod
    def _scaled_area(width: float, height: float, ratio: float) -> float:
        if ratio == 0:
            return width * width
        return max(width * width / ratio, ratio * height * height)

    def _find_best_row(self, rows: Sequence[_Row], box: IPoint, ratio: float) -> int:
        """Index of the row to extend; len(rows) means open a new row."""
        total_width = max((r.width for r in rows), default=0)
        total_height = sum(r.max_height for r in rows)

        best_row = len(rows)
        best_area = self._scaled_area(
            max(total_width, box.x), total_height + box.y, ratio
        )

        for i, row in enumerate(rows):
            width = max(total_width, row.width + box.x)
            height = total_height - row.max_height + max(row.max_height, box.y)
            area = self._scaled_area(width, height, ratio)
            if area < best_area:
                best_area = area
                best_row = i

        return best_row


__all__ = ["TileToRowsPacker"]
