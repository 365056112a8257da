"""
Export functionality for packed layouts.

Example usage:
    from graph_packing import CircularLayout, ComponentSplitterLayout
    from graph_packing.export import to_svg

    layout = ComponentSplitterLayout(
        nodes=[{} for _ in range(6)],
        links=[{"source": 0, "target": 1}, {"source": 2, "target": 3}],
        secondary_layout=CircularLayout(),
    ).run()

    svg_content = to_svg(layout, show_boxes=True)
    with open("graph.svg", "w") as f:
        f.write(svg_content)
"""

from .svg import to_svg

__all__ = [
    "to_svg",
]
