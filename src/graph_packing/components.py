"""
Connected component extraction.

This module splits a graph into its connected components and builds
isolated copies of single components:
- connected_components: BFS grouping of node indices
- ComponentInfo: read-only node/link grouping per component
- ComponentCopy: a component's nodes and links re-indexed from zero,
  with a mapping back to the original elements
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Optional, Sequence

from .types import Attribute, Link, LinkLike, Node

# Attributes handled explicitly by ComponentCopy; anything else is copied as is
_NODE_FIELDS = frozenset({"index", "x", "y", "z", "width", "height"})
_LINK_FIELDS = frozenset({"source", "target", "length", "weight", "bends"})


def _default_get_source(link: Any) -> int:
    """Default function to extract source index from a link."""
    return _endpoint_index(link["source"] if isinstance(link, dict) else link.source)


def _default_get_target(link: Any) -> int:
    """Default function to extract target index from a link."""
    return _endpoint_index(link["target"] if isinstance(link, dict) else link.target)


def _copy_extras(original: Any, copy: Any, reserved: frozenset[str]) -> None:
    """Copy custom attributes (labels, sort keys, ...) onto a copy element."""
    for key, value in vars(original).items():
        if key not in reserved:
            setattr(copy, key, value)


def _endpoint_index(endpoint: Any) -> int:
    if isinstance(endpoint, int):
        return endpoint
    index = getattr(endpoint, "index", None)
    return index if index is not None else -1


def connected_components(
    n: int,
    links: Sequence[LinkLike],
    get_source: Optional[Callable[[Any], int]] = None,
    get_target: Optional[Callable[[Any], int]] = None,
) -> list[list[int]]:
    """
    Find connected components in a graph.

    Link direction is ignored. Components are returned in order of their
    smallest node index, and each component lists its nodes in ascending
    index order.

    Args:
        n: Number of nodes
        links: List of edges
        get_source: Function to extract source index from link
        get_target: Function to extract target index from link

    Returns:
        List of components, where each component is a list of node indices.

    Example:
        >>> links = [{'source': 0, 'target': 1}, {'source': 2, 'target': 3}]
        >>> components = connected_components(4, links)
        >>> len(components)
        2
    """
    if get_source is None:
        get_source = _default_get_source
    if get_target is None:
        get_target = _default_get_target

    # Build undirected adjacency list
    adj: list[list[int]] = [[] for _ in range(n)]
    for link in links:
        src = get_source(link)
        tgt = get_target(link)
        if 0 <= src < n and 0 <= tgt < n:
            adj[src].append(tgt)
            adj[tgt].append(src)

    visited = [False] * n
    components: list[list[int]] = []

    for start in range(n):
        if visited[start]:
            continue

        # BFS to find all nodes in this component
        component: list[int] = []
        queue: deque[int] = deque([start])
        visited[start] = True

        while queue:
            node = queue.popleft()
            component.append(node)

            for neighbor in adj[node]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        component.sort()
        components.append(component)

    return components


class ComponentInfo:
    """
    Grouping of a graph's nodes and links into connected components.

    Every node and every link with valid endpoints belongs to exactly one
    component. A link belongs to the component of its source node.

    Example:
        info = ComponentInfo(4, [{'source': 0, 'target': 1}])
        info.number_of_components   # 3
        info.nodes_of(0)            # [0, 1]
        info.edges_of(0)            # [0]
    """

    def __init__(
        self,
        n: int,
        links: Sequence[LinkLike],
        get_source: Optional[Callable[[Any], int]] = None,
        get_target: Optional[Callable[[Any], int]] = None,
    ) -> None:
        if get_source is None:
            get_source = _default_get_source

        self._nodes = connected_components(n, links, get_source, get_target)
        self._component_of_node = [0] * n
        for i, component in enumerate(self._nodes):
            for v in component:
                self._component_of_node[v] = i

        self._edges: list[list[int]] = [[] for _ in self._nodes]
        for e, link in enumerate(links):
            src = get_source(link)
            if 0 <= src < n:
                self._edges[self._component_of_node[src]].append(e)

    @property
    def number_of_components(self) -> int:
        """Number of connected components."""
        return len(self._nodes)

    def nodes_of(self, i: int) -> list[int]:
        """Node indices of component i, ascending."""
        return list(self._nodes[i])

    def edges_of(self, i: int) -> list[int]:
        """Link indices of component i, in input order."""
        return list(self._edges[i])

    def component_of(self, node_index: int) -> int:
        """Component number of a node."""
        return self._component_of_node[node_index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        sizes = [len(c) for c in self._nodes]
        return f"ComponentInfo(components={len(sizes)}, sizes={sizes})"


class ComponentCopy:
    """
    Isolated copy of one connected component.

    Nodes are copied with local indices 0..k-1 in component order; links are
    copied with their endpoints rewritten to local indices. Which optional
    attributes travel with the copy is decided by the ``attributes`` flags:
    z coordinates with THREE_D, link weights with EDGE_WEIGHT and bend
    points with EDGE_BENDS. Positions and sizes are always copied, and so
    are custom attributes such as labels, so a secondary layout can read
    them. Only positions, z and bends are written back.

    After a secondary layout has run on ``nodes`` and ``links``,
    ``write_back`` transfers the results to the original elements. Copy
    elements without an original are skipped.
    """

    def __init__(
        self,
        nodes: Sequence[Node],
        links: Sequence[Link],
        node_indices: Sequence[int],
        link_indices: Sequence[int],
        attributes: Attribute = Attribute.EDGE_BENDS,
    ) -> None:
        self.attributes = attributes
        self._original_nodes: list[Node] = [nodes[v] for v in node_indices]
        self._original_links: list[Link] = [links[e] for e in link_indices]

        local = {v: i for i, v in enumerate(node_indices)}
        self.nodes: list[Node] = []
        for i, original in enumerate(self._original_nodes):
            node = Node(
                index=i,
                x=original.x,
                y=original.y,
                width=original.width,
                height=original.height,
            )
            if attributes & Attribute.THREE_D:
                node.z = original.z
            _copy_extras(original, node, _NODE_FIELDS)
            self.nodes.append(node)

        self.links: list[Link] = []
        for original in self._original_links:
            link = Link(
                local[_endpoint_index(original.source)],
                local[_endpoint_index(original.target)],
                length=original.length,
            )
            if attributes & Attribute.EDGE_WEIGHT:
                link.weight = original.weight
            if attributes & Attribute.EDGE_BENDS:
                link.bends = list(original.bends)
            _copy_extras(original, link, _LINK_FIELDS)
            self.links.append(link)

    def original_node(self, node: Node) -> Optional[Node]:
        """Original node of a copy node, or None if it has none."""
        index = node.index
        if index is None or not 0 <= index < len(self._original_nodes):
            return None
        return self._original_nodes[index]

    def original_link(self, position: int) -> Optional[Link]:
        """Original link of the copy link at a position, or None."""
        if not 0 <= position < len(self._original_links):
            return None
        return self._original_links[position]

    def write_back(
        self,
        nodes: Optional[Sequence[Node]] = None,
        links: Optional[Sequence[Link]] = None,
    ) -> None:
        """
        Copy layout results onto the original elements.

        Args:
            nodes: Laid-out copy nodes (default: this copy's nodes)
            links: Laid-out copy links (default: this copy's links)
        """
        if nodes is None:
            nodes = self.nodes
        if links is None:
            links = self.links

        for node in nodes:
            original = self.original_node(node)
            if original is None:
                continue
            original.x = node.x
            original.y = node.y
            if self.attributes & Attribute.THREE_D:
                original.z = node.z

        if self.attributes & Attribute.EDGE_BENDS:
            for position, link in enumerate(links):
                original_link = self.original_link(position)
                if original_link is None:
                    continue
                original_link.bends = list(link.bends)


__all__ = [
    "connected_components",
    "ComponentInfo",
    "ComponentCopy",
]
