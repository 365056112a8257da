"""
Common types for component splitting and packing.

This module provides the fundamental types shared by all layouts:
- Node: Graph vertex with position and size
- Link: Edge connecting two nodes, optionally routed through bend points
- Attribute: Flags naming which optional drawing attributes are present
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Any, Optional, Sequence, TypedDict, Union


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout has begun
    - tick: Fired once per processed component
    - end: Layout has finished
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    alpha: float
    component: Optional[int]


class Attribute(IntFlag):
    """
    Optional drawing attributes carried by nodes and links.

    Node positions and sizes are always present. The flags select which
    additional attributes are copied into per-component layouts and which
    are transformed during reassembly.

    - EDGE_BENDS: Links carry bend point polylines
    - THREE_D: Nodes carry a z coordinate
    - EDGE_WEIGHT: Links carry a weight
    """

    NONE = 0
    EDGE_BENDS = 1
    THREE_D = 2
    EDGE_WEIGHT = 4


class Node:
    """
    Graph node with position and size.

    Attributes:
        index: Index in nodes array (set by layout)
        x: X coordinate (centroid)
        y: Y coordinate (centroid)
        z: Z coordinate (only meaningful with Attribute.THREE_D)
        width: Node width
        height: Node height
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize node with optional properties."""
        self.index: Optional[int] = kwargs.get("index")
        self.x: float = kwargs.get("x", 0.0)
        self.y: float = kwargs.get("y", 0.0)
        self.z: float = kwargs.get("z", 0.0)
        self.width: Optional[float] = kwargs.get("width")
        self.height: Optional[float] = kwargs.get("height")

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        return f"Node(index={self.index}, x={self.x:.2f}, y={self.y:.2f})"


class Link:
    """
    Edge connecting two nodes.

    Attributes:
        source: Source node or node index
        target: Target node or node index
        length: Ideal edge length (optional)
        weight: Edge weight (optional)
        bends: Bend points between source and target, in route order
    """

    def __init__(
        self,
        source: Union[Node, int],
        target: Union[Node, int],
        length: Optional[float] = None,
        weight: Optional[float] = None,
        bends: Optional[Sequence[tuple[float, float]]] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize link between two nodes.

        Args:
            source: Source node or node index (required)
            target: Target node or node index (required)
            length: Ideal edge length (optional)
            weight: Edge weight (optional)
            bends: Bend points as (x, y) pairs (optional)

        Raises:
            ValueError: If source or target is None
        """
        if source is None:
            raise ValueError("Link source cannot be None")
        if target is None:
            raise ValueError("Link target cannot be None")

        self.source = source
        self.target = target
        self.length = length
        self.weight = weight
        self.bends: list[tuple[float, float]] = (
            [(float(x), float(y)) for x, y in bends] if bends else []
        )

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        if isinstance(self.source, int):
            src: Any = self.source
        else:
            src = getattr(self.source, "index", None)
        if isinstance(self.target, int):
            tgt: Any = self.target
        else:
            tgt = getattr(self.target, "index", None)
        if self.bends:
            return f"Link({src} -> {tgt}, bends={len(self.bends)})"
        return f"Link({src} -> {tgt})"


# Type aliases for Pythonic API
# These allow flexible input types while maintaining type safety
NodeLike = Union[Node, dict[str, Any], Any]
"""Input type for nodes: Node objects, dicts, or objects with node attributes."""

LinkLike = Union[Link, dict[str, Any], Any]
"""Input type for links: Link objects, dicts, or objects with source/target."""


__all__ = [
    "EventType",
    "Event",
    "Attribute",
    "Node",
    "Link",
    "NodeLike",
    "LinkLike",
]
