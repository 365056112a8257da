"""
Component splitting and reassembly.

This module provides the layout that packs the connected components of a
graph into one drawing:
- ComponentSplitterLayout: Per-component layout, rotation and packing
- optimize_orientation: Minimum-area rotation of one component
- transform_point / reassemble: Placement of a component in the packing
"""

from .orientation import (
    ComponentGeometry,
    PointRecord,
    center_points,
    collect_points,
    minimum_bounding_rectangle,
    optimize_orientation,
)
from .reassembly import inverse_transform_point, reassemble, transform_point
from .splitter import ComponentSplitterLayout, LayoutConfigurationWarning, SecondaryLayout

__all__ = [
    "ComponentSplitterLayout",
    "LayoutConfigurationWarning",
    "SecondaryLayout",
    "ComponentGeometry",
    "PointRecord",
    "collect_points",
    "center_points",
    "minimum_bounding_rectangle",
    "optimize_orientation",
    "transform_point",
    "inverse_transform_point",
    "reassemble",
]
