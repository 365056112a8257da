"""
Circular layout algorithm.

Places the nodes of a graph evenly on a circle around the origin. Used as
a secondary layout it draws every connected component as its own ring.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Sequence, Union

from ..base import StaticLayout
from ..types import (
    Event,
    LinkLike,
    Node,
    NodeLike,
)


class CircularLayout(StaticLayout):
    """
    Circular layout - positions nodes on a circle centred at the origin.

    Nodes are placed evenly spaced around a circle. Unless a radius is
    given, the circumference grows with the number of nodes so that
    neighbours are ``node_spacing`` apart. A single node sits at the origin.

    Example:
        layout = CircularLayout(
            nodes=[{}, {}, {}, {}, {}],
            links=[...],
            node_spacing=60,
        )
        layout.run()
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # Circular-specific parameters
        radius: Optional[float] = None,
        node_spacing: float = 50.0,
        start_angle: float = 0.0,
        sort_by: Optional[Union[str, Callable[[Node], Any]]] = None,
    ) -> None:
        """
        Initialize Circular layout.

        Args:
            nodes: List of nodes
            links: List of links
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            radius: Circle radius. If None, computed from node_spacing.
            node_spacing: Arc distance between neighbouring nodes (default 50).
            start_angle: Starting angle in radians (default 0).
            sort_by: Sort key for node ordering. Options:
                - None: Keep original order
                - 'degree': Sort by node degree (connections)
                - callable: Custom function taking a Node and returning a sort key
        """
        super().__init__(
            nodes=nodes,
            links=links,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        # Circular-specific configuration
        self._radius: Optional[float] = float(radius) if radius is not None else None
        self._node_spacing: float = float(node_spacing)
        self._start_angle: float = float(start_angle)
        self._sort_by: Optional[Union[str, Callable[[Node], Any]]] = sort_by

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def radius(self) -> Optional[float]:
        """Get circle radius (None = computed from node spacing)."""
        return self._radius

    @radius.setter
    def radius(self, value: Optional[float]) -> None:
        """Set circle radius."""
        self._radius = float(value) if value is not None else None

    @property
    def node_spacing(self) -> float:
        """Get arc distance between neighbouring nodes."""
        return self._node_spacing

    @node_spacing.setter
    def node_spacing(self, value: float) -> None:
        """Set arc distance between neighbouring nodes."""
        self._node_spacing = float(value)

    @property
    def start_angle(self) -> float:
        """Get starting angle in radians."""
        return self._start_angle

    @start_angle.setter
    def start_angle(self, value: float) -> None:
        """Set starting angle in radians."""
        self._start_angle = float(value)

    @property
    def sort_by(self) -> Optional[Union[str, Callable[[Node], Any]]]:
        """Get sort key for node ordering."""
        return self._sort_by

    @sort_by.setter
    def sort_by(self, value: Optional[Union[str, Callable[[Node], Any]]]) -> None:
        """Set sort key for node ordering."""
        self._sort_by = value

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _get_sorted_indices(self) -> list[int]:
        """Get node indices in sorted order."""
        n = len(self._nodes)
        indices = list(range(n))

        if self._sort_by is None:
            return indices

        if self._sort_by == "degree":
            degrees = [0] * n
            for link in self._links:
                degrees[self._get_source_index(link)] += 1
                degrees[self._get_target_index(link)] += 1
            indices.sort(key=lambda i: -degrees[i])
        elif callable(self._sort_by):
            sort_fn = self._sort_by  # Store in local for proper type narrowing
            indices.sort(key=lambda i: sort_fn(self._nodes[i]))

        return indices

    def _compute(self, **kwargs: Any) -> None:
        """Compute circular layout positions."""
        n = len(self._nodes)
        if n == 0:
            return
        if n == 1:
            self._nodes[0].x = 0.0
            self._nodes[0].y = 0.0
            return

        if self._radius is not None:
            radius = self._radius
        else:
            radius = n * self._node_spacing / (2 * math.pi)

        angle_step = 2 * math.pi / n
        for pos, node_idx in enumerate(self._get_sorted_indices()):
            angle = self._start_angle + pos * angle_step
            self._nodes[node_idx].x = radius * math.cos(angle)
            self._nodes[node_idx].y = radius * math.sin(angle)


__all__ = ["CircularLayout"]
