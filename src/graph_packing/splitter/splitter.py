"""
Component splitter layout.

Lays out a disconnected graph one connected component at a time and packs
the component drawings into a single compact drawing:

1. Split the graph into connected components.
2. Run a secondary layout on an isolated copy of each component and copy
   the positions (and bends) back.
3. Rotate each component so that its bounding rectangle is as small as
   possible.
4. Pack the padded rectangles with a Packer.
5. Move every node and bend point to its packed position.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Optional, Sequence, Union

from ..base import BaseLayout, StaticLayout
from ..components import ComponentCopy, ComponentInfo
from ..geometry import HullBuilder, IPoint, convex_hull
from ..packing import Packer, TileToRowsPacker
from ..types import (
    Attribute,
    Event,
    EventType,
    Link,
    LinkLike,
    Node,
    NodeLike,
)
from ..validation import validate_border, validate_offsets, validate_target_ratio
from .orientation import ComponentGeometry, collect_points, optimize_orientation
from .reassembly import reassemble


class LayoutConfigurationWarning(UserWarning):
    """Warning issued when a layout is run without what it needs."""

    pass


SecondaryLayout = Union[BaseLayout, Callable[[list[Node], list[Link]], None]]
"""A BaseLayout, or a callable laying out (nodes, links) in place."""


class ComponentSplitterLayout(StaticLayout):
    """
    Split a graph into components, lay them out separately, and pack them.

    The secondary layout only ever sees one connected component, with nodes
    re-indexed from zero. Afterwards each component is rotated to its
    minimum-area bounding rectangle (width >= height), padded by ``border``
    and placed by the packer.

    Example:
        layout = ComponentSplitterLayout(
            nodes=[{} for _ in range(7)],
            links=[
                {'source': 0, 'target': 1},
                {'source': 1, 'target': 2},
                {'source': 3, 'target': 4},
            ],
            secondary_layout=CircularLayout(),
            target_ratio=1.5,
        )
        layout.run()

        for node in layout.nodes:
            print(f"Node {node.index}: ({node.x}, {node.y})")
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # ComponentSplitter-specific parameters
        secondary_layout: Optional[SecondaryLayout] = None,
        packer: Optional[Packer] = None,
        hull_builder: HullBuilder = convex_hull,
        target_ratio: float = 1.0,
        border: int = 30,
        attributes: Attribute = Attribute.EDGE_BENDS,
    ) -> None:
        """
        Initialize ComponentSplitter layout.

        Args:
            nodes: List of nodes
            links: List of links
            on_start: Callback for start event
            on_tick: Callback fired after each component's secondary layout
            on_end: Callback for end event
            secondary_layout: Layout applied to each component. Either a
                BaseLayout (its nodes and links are replaced by the component
                copy before run()) or a callable taking (nodes, links).
                If None, run() leaves the drawing unchanged.
            packer: Packer for the component boxes. Default TileToRowsPacker.
            hull_builder: Convex hull construction. Default convex_hull.
            target_ratio: Desired width / height of the packed drawing.
            border: Padding added to each component box's width and height.
            attributes: Optional attributes present in the drawing
                (EDGE_BENDS, THREE_D, EDGE_WEIGHT).
        """
        super().__init__(
            nodes=nodes,
            links=links,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        # ComponentSplitter-specific configuration
        self._secondary_layout: Optional[SecondaryLayout] = secondary_layout
        self._packer: Packer = packer if packer is not None else TileToRowsPacker()
        self._hull_builder: HullBuilder = hull_builder
        self._target_ratio: float = validate_target_ratio(target_ratio)
        self._border: int = validate_border(border)
        self._attributes: Attribute = Attribute(attributes)

        # Results of the last run
        self._components: Optional[ComponentInfo] = None
        self._geometries: list[ComponentGeometry] = []
        self._offsets: list[IPoint] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def secondary_layout(self) -> Optional[SecondaryLayout]:
        """Get the layout applied to each component."""
        return self._secondary_layout

    @secondary_layout.setter
    def secondary_layout(self, value: Optional[SecondaryLayout]) -> None:
        """Set the layout applied to each component."""
        self._secondary_layout = value

    @property
    def packer(self) -> Packer:
        """Get the packer placing component boxes."""
        return self._packer

    @packer.setter
    def packer(self, value: Packer) -> None:
        """Set the packer placing component boxes."""
        self._packer = value

    @property
    def hull_builder(self) -> HullBuilder:
        """Get the convex hull construction."""
        return self._hull_builder

    @hull_builder.setter
    def hull_builder(self, value: HullBuilder) -> None:
        """Set the convex hull construction."""
        self._hull_builder = value

    @property
    def target_ratio(self) -> float:
        """Get the desired width / height of the packed drawing."""
        return self._target_ratio

    @target_ratio.setter
    def target_ratio(self, value: float) -> None:
        """Set the desired width / height of the packed drawing."""
        self._target_ratio = validate_target_ratio(value)

    @property
    def border(self) -> int:
        """Get the padding added to each component box."""
        return self._border

    @border.setter
    def border(self, value: int) -> None:
        """Set the padding added to each component box."""
        self._border = validate_border(value)

    @property
    def attributes(self) -> Attribute:
        """Get the optional drawing attributes."""
        return self._attributes

    @attributes.setter
    def attributes(self, value: Attribute) -> None:
        """Set the optional drawing attributes."""
        self._attributes = Attribute(value)

    @property
    def components(self) -> Optional[ComponentInfo]:
        """Component grouping of the last run (None before running)."""
        return self._components

    @property
    def geometries(self) -> list[ComponentGeometry]:
        """Per-component rotation and rectangle of the last run."""
        return self._geometries

    @property
    def offsets(self) -> list[IPoint]:
        """Per-component packer offsets of the last run."""
        return self._offsets

    @property
    def boxes(self) -> list[IPoint]:
        """Per-component padded boxes of the last run."""
        return [g.box for g in self._geometries]

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _compute(self, **kwargs: Any) -> None:
        """Lay out every component and pack the results."""
        if self._secondary_layout is None:
            warnings.warn(
                "ComponentSplitterLayout has no secondary layout; "
                "the drawing is left unchanged.",
                LayoutConfigurationWarning,
                stacklevel=3,
            )
            return

        n = len(self._nodes)
        if n == 0:
            return

        self.validate()
        components = ComponentInfo(n, self._links)

        for i in range(components.number_of_components):
            copy = ComponentCopy(
                self._nodes,
                self._links,
                components.nodes_of(i),
                components.edges_of(i),
                self._attributes,
            )
            nodes, links = self._layout_component(copy)
            copy.write_back(nodes, links)
            self.trigger(
                {
                    "type": EventType.tick,
                    "alpha": 1.0 - (i + 1) / components.number_of_components,
                    "component": i,
                }
            )

        self.reassemble_drawings(components)

    def _layout_component(self, copy: ComponentCopy) -> tuple[list[Node], list[Link]]:
        """Run the secondary layout on a component copy."""
        layout = self._secondary_layout
        if isinstance(layout, BaseLayout):
            layout.nodes = copy.nodes
            layout.links = copy.links
            layout.run()
            return layout.nodes, layout.links

        assert layout is not None
        layout(copy.nodes, copy.links)
        return copy.nodes, copy.links

    def reassemble_drawings(
        self, components: Optional[ComponentInfo] = None
    ) -> list[ComponentGeometry]:
        """
        Rotate and pack the component drawings currently held by the nodes.

        Can be called directly to pack a drawing whose components were laid
        out elsewhere; run() calls it after the secondary layout pass.

        Args:
            components: Component grouping. Computed from the links if None.

        Returns:
            Geometry of each component, in component order
        """
        self._initialize_indices()
        if components is None:
            self.validate()
            components = ComponentInfo(len(self._nodes), self._links)
        self._components = components

        records_per_component = []
        geometries: list[ComponentGeometry] = []
        for i in range(components.number_of_components):
            records = collect_points(
                self._nodes,
                self._links,
                components.nodes_of(i),
                components.edges_of(i),
                self._attributes,
            )
            geometries.append(optimize_orientation(records, self._border, self._hull_builder))
            records_per_component.append(records)

        boxes = [g.box for g in geometries]
        offsets = self._packer.pack(boxes, self._target_ratio)
        validate_offsets(offsets, len(boxes))

        for records, geometry, offset in zip(records_per_component, geometries, offsets):
            reassemble(records, geometry, offset)

        self._geometries = geometries
        self._offsets = list(offsets)
        return geometries


__all__ = [
    "ComponentSplitterLayout",
    "LayoutConfigurationWarning",
    "SecondaryLayout",
]
