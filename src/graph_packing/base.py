"""
Base classes for layout algorithms.

This module provides abstract base classes that define the common interface
and shared functionality for all layouts in the package:

- BaseLayout: Abstract base with event system, node/link management
- StaticLayout: For single-pass layouts (circular, component packing, etc.)

Any BaseLayout can be plugged into ComponentSplitterLayout as the
secondary layout that positions the nodes of a single component.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import (
    Event,
    EventType,
    Link,
    LinkLike,
    Node,
    NodeLike,
)
from .validation import InvalidNodeError, validate_link_indices


class BaseLayout(ABC):
    """
    Abstract base class for all layout algorithms.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - Node/link management via properties

    Example:
        layout = SomeLayout(
            nodes=nodes,
            links=links,
        )
        layout.run()

        # Access results via properties
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
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            nodes: List of nodes (Node objects, dicts, or objects with attributes)
            links: List of links (Link objects or dicts with source/target)
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        # Set initial values via properties (triggers normalization)
        if nodes is not None:
            self.nodes = nodes
        if links is not None:
            self.links = links

        # Register event callbacks
        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Get the list of nodes."""
        return self._nodes

    @nodes.setter
    def nodes(self, value: Sequence[NodeLike]) -> None:
        """Set nodes from a sequence of Node objects, dicts, or objects."""
        self._nodes = []
        for i, node_data in enumerate(value):
            if node_data is None:
                raise InvalidNodeError(f"Node {i} is None")
            if isinstance(node_data, Node):
                self._nodes.append(node_data)
            elif isinstance(node_data, dict):
                self._nodes.append(Node(**node_data))
            else:
                # Generic object - copy attributes
                node = Node()
                for attr in ["index", "x", "y", "z", "width", "height"]:
                    if hasattr(node_data, attr):
                        setattr(node, attr, getattr(node_data, attr))
                self._nodes.append(node)

    @property
    def links(self) -> list[Link]:
        """Get the list of links."""
        return self._links

    @links.setter
    def links(self, value: Sequence[LinkLike]) -> None:
        """Set links from a sequence of Link objects, dicts, or objects."""
        self._links = []
        for link_data in value:
            if isinstance(link_data, Link):
                self._links.append(link_data)
            elif isinstance(link_data, dict):
                self._links.append(Link(**link_data))
            else:
                # Generic object - extract source/target
                source = getattr(link_data, "source", 0)
                target = getattr(link_data, "target", 0)
                length = getattr(link_data, "length", None)
                weight = getattr(link_data, "weight", None)
                bends = getattr(link_data, "bends", None)
                self._links.append(Link(source, target, length, weight, bends))

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate current configuration.

        Checks that all link references point to valid node indices.
        Called automatically by run() but can be called early for fail-fast
        behavior.

        Returns:
            self (for chaining)

        Raises:
            InvalidLinkError: If any link references an invalid node index.
        """
        if self._links:
            validate_link_indices(self._links, len(self._nodes), strict=True)
        return self

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        This is the main entry point. Implementations should:
        1. Compute node positions (and bends, if any)
        2. Fire appropriate events

        Returns:
            self (for chaining)
        """
        pass

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _initialize_indices(self) -> None:
        """Assign indices to nodes that don't have them."""
        for i, node in enumerate(self._nodes):
            if node.index is None:
                node.index = i

    def _get_source_index(self, link: Link) -> int:
        """Get source node index from a link."""
        if isinstance(link.source, int):
            return link.source
        return link.source.index if link.source.index is not None else 0

    def _get_target_index(self, link: Link) -> int:
        """Get target node index from a link."""
        if isinstance(link.target, int):
            return link.target
        return link.target.index if link.target.index is not None else 0


class StaticLayout(BaseLayout):
    """
    Base class for single-pass layout algorithms.

    These layouts compute positions in one pass without iteration.

    Example:
        layout = CircularLayout(
            nodes=nodes,
            links=links,
            radius=200,
        )
        layout.run()
    """

    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Fires start event, computes layout, fires end event.

        Args:
            **kwargs: Additional arguments passed to _compute()

        Returns:
            self (for chaining)
        """
        self._initialize_indices()
        self.trigger({"type": EventType.start, "alpha": 1.0})

        # Subclasses implement _compute()
        self._compute(**kwargs)

        self.trigger({"type": EventType.end, "alpha": 0.0})
        return self

    @abstractmethod
    def _compute(self, **kwargs: Any) -> None:
        """
        Compute node positions.

        Subclasses must implement this to perform the actual layout computation.
        """
        pass


__all__ = [
    "BaseLayout",
    "StaticLayout",
]
