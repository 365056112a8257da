"""
Orientation optimizer for component drawings.

For one connected component this module finds the rotation under which the
component's drawing has the smallest axis-aligned bounding rectangle:

1. Every node position and bend point is collected as a PointRecord and
   the whole point set is centred at its centroid.
2. The convex hull of the centred points is built.
3. Each hull edge is tried as one side of the bounding rectangle
   (the minimum-area enclosing rectangle of a convex polygon has a side
   collinear with one of its edges).
4. The winning edge defines the rotation; width and height are swapped
   if needed so that the rectangle is never taller than wide.

The result is a ComponentGeometry that the reassembly step consumes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from ..geometry import (
    ConvexPolygon,
    DPoint,
    HullBuilder,
    IPoint,
    convex_hull,
    outward_normal,
    rotate_polar,
)
from ..types import Attribute, Link, Node

# Extents below this are raised to it so no rectangle has zero area.
MIN_EXTENT = 1.0

# Normal used when the hull has at most one vertex.
DEFAULT_NORMAL = (1.0, 1.0)

# Slack allowed before an extent is rounded up to the next integer.
_CEIL_TOLERANCE = 1e-9


@dataclass
class PointRecord:
    """
    Reference to one point of a component drawing.

    A record points either at a node position (``bend is None``) or at
    bend ``bend`` of a link. Reading and writing through the record always
    touches the point it was created for, whatever order records are
    processed in.
    """

    owner: Union[Node, Link]
    bend: Optional[int] = None

    def get(self) -> tuple[float, float]:
        if self.bend is None:
            node = self.owner
            return float(node.x), float(node.y)  # type: ignore[union-attr]
        x, y = self.owner.bends[self.bend]  # type: ignore[union-attr]
        return float(x), float(y)

    def set(self, x: float, y: float) -> None:
        if self.bend is None:
            self.owner.x = x  # type: ignore[union-attr]
            self.owner.y = y  # type: ignore[union-attr]
        else:
            self.owner.bends[self.bend] = (x, y)  # type: ignore[union-attr]


@dataclass
class ComponentGeometry:
    """
    Rotation and bounding rectangle chosen for one component.

    Attributes:
        rotation: Rotation angle in radians applied around the centroid
        width: Rectangle width after rotation (never less than height)
        height: Rectangle height after rotation
        corrective: Offset subtracted after packing so the rotated drawing
            sits border / 2 inside its padded box
        border: Padding added to the box in each dimension
    """

    rotation: float
    width: float
    height: float
    corrective: DPoint
    border: int = 30

    @property
    def box(self) -> IPoint:
        """Padded integer box handed to the packer."""
        return IPoint(
            math.ceil(self.width - _CEIL_TOLERANCE) + self.border,
            math.ceil(self.height - _CEIL_TOLERANCE) + self.border,
        )


def collect_points(
    nodes: Sequence[Node],
    links: Sequence[Link],
    node_indices: Sequence[int],
    link_indices: Sequence[int],
    attributes: Attribute = Attribute.EDGE_BENDS,
) -> list[PointRecord]:
    """
    Collect the points of one component.

    Node positions come first in ``node_indices`` order, followed by the
    bend points of the links in ``link_indices`` order when EDGE_BENDS is
    set.

    Args:
        nodes: All nodes of the graph
        links: All links of the graph
        node_indices: Nodes of the component
        link_indices: Links of the component
        attributes: Attribute flags of the drawing

    Returns:
        One PointRecord per point
    """
    records = [PointRecord(nodes[v]) for v in node_indices]
    if attributes & Attribute.EDGE_BENDS:
        for e in link_indices:
            link = links[e]
            records.extend(PointRecord(link, k) for k in range(len(link.bends)))
    return records


def center_points(records: Sequence[PointRecord]) -> DPoint:
    """
    Move a point set so that its centroid is at the origin.

    Args:
        records: Points of one component

    Returns:
        The centroid that was subtracted

    Raises:
        ValueError: If there are no points
    """
    if not records:
        raise ValueError("cannot center a component without points")

    coords = np.array([r.get() for r in records], dtype=float)
    cx, cy = coords.mean(axis=0)
    for record, (x, y) in zip(records, coords):
        record.set(float(x - cx), float(y - cy))
    return DPoint(float(cx), float(cy))


def minimum_bounding_rectangle(hull: ConvexPolygon) -> tuple[np.ndarray, float, float]:
    """
    Search the hull edges for the smallest enclosing rectangle.

    For every edge the rectangle has one side on the edge's line. Its height
    is the hull's extent along the edge normal, its width the hull's extent
    along the edge. Both are clamped to MIN_EXTENT. On equal areas the edge
    visited last wins. Zero-length edges are skipped.

    Args:
        hull: Convex hull, clockwise or counter-clockwise

    Returns:
        (unit normal of the winning edge, width, height). The normal points
        outward for a counter-clockwise hull. A hull with at most one vertex
        gives (DEFAULT_NORMAL, 1, 1).
    """
    if len(hull) <= 1:
        return np.array(DEFAULT_NORMAL), MIN_EXTENT, MIN_EXTENT

    vertices = hull.vertices
    best_area = math.inf
    best_normal = np.array(DEFAULT_NORMAL)
    best_width = MIN_EXTENT
    best_height = MIN_EXTENT

    for start, end in hull.edges():
        normal = outward_normal(start, end)
        if not normal.any():
            continue
        relative = vertices - start

        # Extent across the edge line; the hull may run either way round
        across = relative @ normal
        height = float(across.max() - across.min())

        direction = np.array([-normal[1], normal[0]])
        along = relative @ direction
        width = float(along.max() - along.min())

        height = max(height, MIN_EXTENT)
        width = max(width, MIN_EXTENT)

        area = height * width
        if area <= best_area:
            best_area = area
            best_normal = normal
            best_width = width
            best_height = height

    return best_normal, best_width, best_height


def optimize_orientation(
    records: Sequence[PointRecord],
    border: int = 30,
    hull_builder: HullBuilder = convex_hull,
) -> ComponentGeometry:
    """
    Centre a component and choose its rotation and bounding rectangle.

    The records are modified in place: afterwards they hold the centred
    (not yet rotated) coordinates.

    Args:
        records: Points of one component, from collect_points()
        border: Padding added to each box dimension
        hull_builder: Convex hull construction

    Returns:
        ComponentGeometry of the component
    """
    center_points(records)
    coords = np.array([r.get() for r in records], dtype=float)
    hull = hull_builder(coords)

    normal, width, height = minimum_bounding_rectangle(hull)

    # Turn the winning normal to point up (negative y)
    angle = -math.atan2(normal[1], normal[0]) + 1.5 * math.pi
    if width < height:
        angle += 0.5 * math.pi
        width, height = height, width

    left = math.inf
    bottom = -math.inf
    for x, y in hull.vertices:
        rx, ry = rotate_polar(float(x), float(y), angle)
        left = min(left, rx)
        bottom = max(bottom, ry)
    if len(hull) == 0:
        left = bottom = 0.0

    padding = DPoint(0.5 * border, 0.5 * border)
    corrective = DPoint(left, bottom - height) - padding
    return ComponentGeometry(
        rotation=angle,
        width=width,
        height=height,
        corrective=corrective,
        border=border,
    )


__all__ = [
    "MIN_EXTENT",
    "PointRecord",
    "ComponentGeometry",
    "collect_points",
    "center_points",
    "minimum_bounding_rectangle",
    "optimize_orientation",
]
