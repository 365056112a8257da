"""
Packing quality metrics.

Provides quantitative measures of a packed drawing:
- Drawing bounds: Extent of all nodes and bend points
- Aspect ratio: Width / height of the drawing
- Box overlap: Whether placed boxes intersect

All metrics work with final node positions from any layout algorithm.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .geometry import IPoint
from .types import Link, Node


def drawing_bounds(
    nodes: Sequence[Node],
    links: Optional[Sequence[Link]] = None,
    include_sizes: bool = False,
) -> tuple[float, float, float, float]:
    """
    Bounding box of a drawing.

    Args:
        nodes: Positioned nodes
        links: Links whose bend points are included (optional)
        include_sizes: If True, extend by half the node width/height

    Returns:
        (min_x, min_y, max_x, max_y); all zero for an empty drawing
    """
    xs: list[float] = []
    ys: list[float] = []

    for node in nodes:
        half_w = (node.width or 0.0) / 2 if include_sizes else 0.0
        half_h = (node.height or 0.0) / 2 if include_sizes else 0.0
        xs.extend((node.x - half_w, node.x + half_w))
        ys.extend((node.y - half_h, node.y + half_h))

    for link in links or ():
        for bx, by in link.bends:
            xs.append(bx)
            ys.append(by)

    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))


def aspect_ratio(
    nodes: Sequence[Node],
    links: Optional[Sequence[Link]] = None,
    include_sizes: bool = False,
) -> float:
    """
    Width / height of a drawing's bounding box.

    Returns:
        Aspect ratio, or 1.0 when the drawing has zero height
    """
    min_x, min_y, max_x, max_y = drawing_bounds(nodes, links, include_sizes)
    height = max_y - min_y
    if height == 0:
        return 1.0
    return (max_x - min_x) / height


def box_overlap(offset_a: IPoint, box_a: IPoint, offset_b: IPoint, box_b: IPoint) -> bool:
    """
    Check if two placed boxes overlap.

    Boxes that only touch along an edge do not overlap.
    """
    return (
        offset_a.x < offset_b.x + box_b.x
        and offset_b.x < offset_a.x + box_a.x
        and offset_a.y < offset_b.y + box_b.y
        and offset_b.y < offset_a.y + box_a.y
    )


def count_box_overlaps(offsets: Sequence[IPoint], boxes: Sequence[IPoint]) -> int:
    """
    Count overlapping pairs among placed boxes.

    Args:
        offsets: Top-left corner of each box
        boxes: Extent of each box

    Returns:
        Number of overlapping pairs

    Time Complexity: O(n^2)
    """
    count = 0
    n = len(boxes)
    for i in range(n):
        for j in range(i + 1, n):
            if box_overlap(offsets[i], boxes[i], offsets[j], boxes[j]):
                count += 1
    return count


def packing_density(offsets: Sequence[IPoint], boxes: Sequence[IPoint]) -> float:
    """
    Fraction of the packing's bounding rectangle covered by boxes.

    Returns:
        Density in [0, 1] for non-overlapping boxes; 0.0 for no boxes
    """
    if not boxes:
        return 0.0
    width = max(o.x + b.x for o, b in zip(offsets, boxes)) - min(o.x for o in offsets)
    height = max(o.y + b.y for o, b in zip(offsets, boxes)) - min(o.y for o in offsets)
    if width <= 0 or height <= 0:
        return 0.0
    return sum(b.x * b.y for b in boxes) / (width * height)


__all__ = [
    "drawing_bounds",
    "aspect_ratio",
    "box_overlap",
    "count_box_overlaps",
    "packing_density",
]
