"""
SVG export for packed layouts.

Generates SVG drawings of a layout's nodes and links. Links are drawn as
polylines through their bend points; for a ComponentSplitterLayout the
padded component boxes can be drawn as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from xml.sax.saxutils import escape

from ..metrics import drawing_bounds

if TYPE_CHECKING:
    from ..base import BaseLayout
    from ..types import Link, Node


def to_svg(
    layout: BaseLayout,
    *,
    node_radius: float = 10.0,
    node_color: str = "#4a90d9",
    node_stroke: str = "#2c5aa0",
    node_stroke_width: float = 2.0,
    edge_color: str = "#666666",
    edge_width: float = 1.5,
    show_labels: bool = True,
    label_color: str = "#000000",
    font_size: float = 12.0,
    font_family: str = "sans-serif",
    show_boxes: bool = False,
    box_color: str = "#cc3333",
    padding: float = 40.0,
    background: Optional[str] = None,
    node_shape: str = "circle",
) -> str:
    """
    Export a layout to SVG format.

    Args:
        layout: A layout object with nodes and links after run()
        node_radius: Radius for nodes without a size (default 10)
        node_color: Fill color for nodes (default blue)
        node_stroke: Stroke color for nodes (default darker blue)
        node_stroke_width: Stroke width for nodes (default 2)
        edge_color: Color for edges (default gray)
        edge_width: Width for edges (default 1.5)
        show_labels: Whether to show node labels (default True)
        label_color: Color for labels (default black)
        font_size: Font size for labels (default 12)
        font_family: Font family for labels (default sans-serif)
        show_boxes: Draw the packed component boxes, if the layout has them
        box_color: Stroke color for component boxes (default red)
        padding: Padding around the graph (default 40)
        background: Background color (default None for transparent)
        node_shape: Shape of nodes: "circle" or "rect" (default "circle")

    Returns:
        SVG string representation of the graph
    """
    nodes = layout.nodes
    links = layout.links

    if not nodes:
        return _empty_svg(100, 100, background)

    min_x, min_y, max_x, max_y = drawing_bounds(nodes, links)
    min_x -= node_radius
    min_y -= node_radius
    max_x += node_radius
    max_y += node_radius

    boxes = _component_boxes(layout) if show_boxes else []
    for bx, by, bw, bh in boxes:
        min_x = min(min_x, bx)
        min_y = min(min_y, by)
        max_x = max(max_x, bx + bw)
        max_y = max(max_y, by + bh)

    # Calculate SVG dimensions
    width = max_x - min_x + 2 * padding
    height = max_y - min_y + 2 * padding

    # Offset to place graph with padding
    offset_x = padding - min_x
    offset_y = padding - min_y

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    if boxes:
        svg_parts.append('  <g class="components">')
        for bx, by, bw, bh in boxes:
            svg_parts.append(
                f'    <rect x="{bx + offset_x:.1f}" y="{by + offset_y:.1f}" '
                f'width="{bw:.1f}" height="{bh:.1f}" fill="none" '
                f'stroke="{escape(box_color)}" stroke-dasharray="4 2"/>'
            )
        svg_parts.append("  </g>")

    svg_parts.append('  <g class="edges">')
    for link in links:
        edge_svg = _render_edge(link, nodes, offset_x, offset_y, edge_color, edge_width)
        if edge_svg:
            svg_parts.append(edge_svg)
    svg_parts.append("  </g>")

    svg_parts.append('  <g class="nodes">')
    for node in nodes:
        svg_parts.append(
            _render_node(
                node,
                offset_x,
                offset_y,
                node_radius,
                node_color,
                node_stroke,
                node_stroke_width,
                node_shape,
            )
        )
    svg_parts.append("  </g>")

    if show_labels:
        svg_parts.append('  <g class="labels">')
        for node in nodes:
            svg_parts.append(
                _render_label(node, offset_x, offset_y, label_color, font_size, font_family)
            )
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _component_boxes(layout: BaseLayout) -> list[tuple[float, float, float, float]]:
    """(x, y, width, height) of every packed component box of a layout."""
    offsets = getattr(layout, "offsets", None) or []
    boxes = getattr(layout, "boxes", None) or []
    return [(o.x, o.y, b.x, b.y) for o, b in zip(offsets, boxes)]


def _empty_svg(width: float, height: float, background: Optional[str]) -> str:
    """Create an empty SVG."""
    bg = ""
    if background:
        bg = f'\n  <rect width="100%" height="100%" fill="{escape(background)}"/>'
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">{bg}\n</svg>'
    )


def _render_edge(
    link: Link,
    nodes: list[Node],
    offset_x: float,
    offset_y: float,
    color: str,
    width: float,
) -> Optional[str]:
    """Render an edge as a polyline through its bends."""
    src_idx = link.source if isinstance(link.source, int) else link.source.index
    tgt_idx = link.target if isinstance(link.target, int) else link.target.index

    if src_idx is None or tgt_idx is None:
        return None
    if src_idx >= len(nodes) or tgt_idx >= len(nodes):
        return None

    src = nodes[src_idx]
    tgt = nodes[tgt_idx]

    points = [(src.x, src.y)] + list(link.bends) + [(tgt.x, tgt.y)]
    path_data = " ".join(f"{x + offset_x:.1f},{y + offset_y:.1f}" for x, y in points)

    return (
        f'    <polyline points="{path_data}" '
        f'fill="none" stroke="{escape(color)}" stroke-width="{width}"/>'
    )


def _render_node(
    node: Node,
    offset_x: float,
    offset_y: float,
    radius: float,
    fill: str,
    stroke: str,
    stroke_width: float,
    shape: str,
) -> str:
    """Render a node."""
    x = node.x + offset_x
    y = node.y + offset_y

    if shape == "rect":
        w = node.width if node.width else radius * 2
        h = node.height if node.height else radius * 2
        return (
            f'    <rect x="{x - w / 2:.1f}" y="{y - h / 2:.1f}" '
            f'width="{w:.1f}" height="{h:.1f}" '
            f'fill="{escape(fill)}" stroke="{escape(stroke)}" '
            f'stroke-width="{stroke_width}" rx="4"/>'
        )
    else:  # circle
        r = radius
        if node.width and node.height:
            r = min(node.width, node.height) / 2
        return (
            f'    <circle cx="{x:.1f}" cy="{y:.1f}" r="{r:.1f}" '
            f'fill="{escape(fill)}" stroke="{escape(stroke)}" '
            f'stroke-width="{stroke_width}"/>'
        )


def _render_label(
    node: Node,
    offset_x: float,
    offset_y: float,
    color: str,
    font_size: float,
    font_family: str,
) -> str:
    """Render a node label."""
    x = node.x + offset_x
    y = node.y + offset_y

    label = str(node.index) if node.index is not None else ""
    if hasattr(node, "label"):
        label = str(getattr(node, "label"))
    elif hasattr(node, "name"):
        label = str(getattr(node, "name"))

    return (
        f'    <text x="{x:.1f}" y="{y:.1f}" '
        f'fill="{escape(color)}" font-size="{font_size}" '
        f'font-family="{escape(font_family)}" '
        f'text-anchor="middle" dominant-baseline="central">'
        f"{escape(label)}</text>"
    )


__all__ = [
    "to_svg",
]
