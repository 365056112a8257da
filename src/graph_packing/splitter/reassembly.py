"""
Reassembly of packed component drawings.

Moves every point of a centred component into the packed drawing:
rotate around the origin, translate by the packer offset, then subtract
the component's corrective offset.
"""

from __future__ import annotations

from typing import Sequence

from ..geometry import DPoint, IPoint, rotate_polar
from .orientation import ComponentGeometry, PointRecord


def transform_point(
    x: float, y: float, geometry: ComponentGeometry, offset: IPoint
) -> tuple[float, float]:
    """
    Map a centred point into the packed drawing.

    Args:
        x: Centred x coordinate
        y: Centred y coordinate
        geometry: Geometry of the point's component
        offset: Packer offset of the component's box

    Returns:
        Final (x, y)
    """
    rx, ry = rotate_polar(x, y, geometry.rotation)
    placed = DPoint(rx + offset.x, ry + offset.y) - geometry.corrective
    return placed.as_tuple()


def inverse_transform_point(
    x: float, y: float, geometry: ComponentGeometry, offset: IPoint
) -> tuple[float, float]:
    """Map a point of the packed drawing back to centred coordinates."""
    rotated = DPoint(x - offset.x, y - offset.y) + geometry.corrective
    return rotate_polar(rotated.x, rotated.y, -geometry.rotation)


def reassemble(
    records: Sequence[PointRecord], geometry: ComponentGeometry, offset: IPoint
) -> None:
    """Apply transform_point() to every point of a component, in place."""
    for record in records:
        x, y = record.get()
        record.set(*transform_point(x, y, geometry, offset))


__all__ = [
    "transform_point",
    "inverse_transform_point",
    "reassemble",
]
