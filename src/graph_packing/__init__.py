"""
graph-packing: Component splitting and packing for graph layouts.

This package lays out disconnected graphs: each connected component is laid
out on its own by a secondary layout, rotated to its minimum-area bounding
rectangle, and packed with the others into one drawing close to a target
aspect ratio.

Available modules:
- splitter: ComponentSplitterLayout and the rotation/reassembly steps
- packing: Box packers (row-based by default)
- components: Connected component extraction
- geometry: Points, convex hulls, polar rotation
- circular: Circular layout, a ready-made secondary layout
"""

__version__ = "0.1.0"

# Base classes for building layouts
from .base import (
    BaseLayout,
    StaticLayout,
)

# Circular layout
from .circular import CircularLayout

# Component extraction
from .components import (
    ComponentCopy,
    ComponentInfo,
    connected_components,
)

# Geometry
from .geometry import (
    ConvexPolygon,
    DPoint,
    IPoint,
    convex_hull,
    rotate_polar,
)

# Metrics for packing quality evaluation
from .metrics import (
    aspect_ratio,
    box_overlap,
    count_box_overlaps,
    drawing_bounds,
    packing_density,
)

# Packers
from .packing import Packer, TileToRowsPacker

# Component splitting
from .splitter import (
    ComponentGeometry,
    ComponentSplitterLayout,
    LayoutConfigurationWarning,
    PointRecord,
    optimize_orientation,
)

# Shared types for all layouts
from .types import (
    Attribute,
    Event,
    EventType,
    Link,
    LinkLike,
    Node,
    NodeLike,
)

# Validation utilities
from .validation import (
    InvalidBorderError,
    InvalidLinkError,
    InvalidNodeError,
    InvalidRatioError,
    PackingError,
    ValidationError,
    validate_border,
    validate_link_indices,
    validate_target_ratio,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "Link",
    "Attribute",
    "EventType",
    "Event",
    # Type aliases for API
    "NodeLike",
    "LinkLike",
    # Base classes
    "BaseLayout",
    "StaticLayout",
    # Component splitting
    "ComponentSplitterLayout",
    "LayoutConfigurationWarning",
    "ComponentGeometry",
    "PointRecord",
    "optimize_orientation",
    # Packers
    "Packer",
    "TileToRowsPacker",
    # Component extraction
    "connected_components",
    "ComponentInfo",
    "ComponentCopy",
    # Geometry
    "DPoint",
    "IPoint",
    "ConvexPolygon",
    "convex_hull",
    "rotate_polar",
    # Circular layout
    "CircularLayout",
    # Metrics
    "drawing_bounds",
    "aspect_ratio",
    "box_overlap",
    "count_box_overlaps",
    "packing_density",
    # Validation
    "ValidationError",
    "InvalidNodeError",
    "InvalidLinkError",
    "InvalidRatioError",
    "InvalidBorderError",
    "PackingError",
    "validate_link_indices",
    "validate_target_ratio",
    "validate_border",
]
