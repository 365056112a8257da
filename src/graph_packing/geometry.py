"""
Planar geometry helpers for component packing.

Provides point types, convex hulls and the polar rotation used to turn
component drawings:
- DPoint / IPoint: continuous and integer points
- ConvexPolygon: counter-clockwise hull with cyclic successor access
- convex_hull: Andrew's monotone chain over an (n, 2) array
- rotate_polar: rotation about the origin in polar form
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, Union

import numpy as np


@dataclass(frozen=True)
class DPoint:
    """A point with double precision coordinates."""

    x: float
    y: float

    def __add__(self, other: DPoint) -> DPoint:
        return DPoint(self.x + other.x, self.y + other.y)

    def __sub__(self, other: DPoint) -> DPoint:
        return DPoint(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class IPoint:
    """A point (or box extent) with integer coordinates."""

    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


class ConvexPolygon:
    """
    Convex polygon stored as counter-clockwise vertices.

    Orientation is counter-clockwise in a y-up frame, so for an edge
    from ``p[i]`` to ``p[i + 1]`` the interior lies to its left.

    Attributes:
        vertices: (k, 2) float array, no vertex repeated
    """

    def __init__(self, vertices: Union[np.ndarray, Sequence[Sequence[float]]]) -> None:
        array = np.asarray(vertices, dtype=float)
        self.vertices: np.ndarray = array.reshape(-1, 2)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[DPoint]:
        for x, y in self.vertices:
            yield DPoint(float(x), float(y))

    def __getitem__(self, i: int) -> DPoint:
        x, y = self.vertices[i]
        return DPoint(float(x), float(y))

    def cyclic_succ(self, i: int) -> int:
        """Index of the vertex following vertex i, wrapping around."""
        return (i + 1) % len(self.vertices)

    def edges(self) -> Iterator[tuple[np.ndarray, np.ndarray]]:
        """Yield (start, end) vertex pairs of every edge, in vertex order."""
        for i in range(len(self.vertices)):
            yield self.vertices[i], self.vertices[self.cyclic_succ(i)]

    def __repr__(self) -> str:
        return f"ConvexPolygon(vertices={len(self.vertices)})"


HullBuilder = Callable[[np.ndarray], ConvexPolygon]
"""Builds the convex hull of an (n, 2) point array."""


def convex_hull(points: Union[np.ndarray, Sequence[Sequence[float]]]) -> ConvexPolygon:
    """
    Convex hull by Andrew's monotone chain.

    Duplicate and collinear points are dropped, so all-coincident input gives
    a single vertex and collinear input gives the two extreme points.

    Args:
        points: (n, 2) array-like of x, y coordinates

    Returns:
        Counter-clockwise ConvexPolygon

    Time Complexity: O(n log n)
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) == 0:
        return ConvexPolygon(pts)

    pts = np.unique(pts, axis=0)  # sorted by x, then y
    if len(pts) <= 2:
        return ConvexPolygon(pts)

    def cross(o: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
        return float((a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0]))

    lower: list[np.ndarray] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: list[np.ndarray] = []
    for p in pts[::-1]:
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return ConvexPolygon(np.vstack((lower[:-1], upper[:-1])))


def outward_normal(start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """
    Unit normal of a counter-clockwise hull edge, pointing away from the hull.

    Args:
        start: Edge start vertex
        end: Edge end vertex

    Returns:
        Unit vector perpendicular to the edge. Zero vector for a zero-length edge.
    """
    dx, dy = float(end[0] - start[0]), float(end[1] - start[1])
    length = math.hypot(dx, dy)
    if length == 0.0:
        return np.zeros(2)
    return np.array([dy / length, -dx / length])


def rotate_polar(x: float, y: float, angle: float) -> tuple[float, float]:
    """
    Rotate a point about the origin by adding to its polar angle.

    Args:
        x: X coordinate
        y: Y coordinate
        angle: Rotation in radians (counter-clockwise in a y-up frame)

    Returns:
        Rotated (x, y)
    """
    ang = math.atan2(y, x) + angle
    radius = math.hypot(x, y)
    return math.cos(ang) * radius, math.sin(ang) * radius


__all__ = [
    "DPoint",
    "IPoint",
    "ConvexPolygon",
    "HullBuilder",
    "convex_hull",
    "outward_normal",
    "rotate_polar",
]
