"""Tests for SVG export."""

import pytest

from graph_packing import CircularLayout, ComponentSplitterLayout, Link, Node
from graph_packing.export import to_svg

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def simple_layout():
    """A simple circular layout for testing."""
    nodes = [{"index": i} for i in range(5)]
    links = [{"source": i, "target": (i + 1) % 5} for i in range(5)]
    return CircularLayout(nodes=nodes, links=links, radius=100).run()


@pytest.fixture
def labeled_layout():
    """A layout with named nodes."""
    nodes = [{"name": "alpha"}, {"name": "b<e>ta"}]
    links = [{"source": 0, "target": 1}]
    return CircularLayout(nodes=nodes, links=links).run()


@pytest.fixture
def packed_layout():
    """Three components packed by the splitter."""
    nodes = [{} for _ in range(6)]
    links = [
        {"source": 0, "target": 1},
        {"source": 1, "target": 2},
        {"source": 3, "target": 4},
    ]
    return ComponentSplitterLayout(
        nodes=nodes, links=links, secondary_layout=CircularLayout()
    ).run()


# =============================================================================
# SVG Export Tests
# =============================================================================


class TestSVGExport:
    """Tests for SVG export."""

    def test_basic_svg_export(self, simple_layout):
        """Export produces an SVG document."""
        svg = to_svg(simple_layout)

        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert 'xmlns="http://www.w3.org/2000/svg"' in svg

    def test_svg_contains_nodes(self, simple_layout):
        """One circle per node."""
        svg = to_svg(simple_layout)
        assert svg.count("<circle") == 5

    def test_svg_contains_edges(self, simple_layout):
        """One polyline per edge."""
        svg = to_svg(simple_layout)
        assert svg.count("<polyline") == 5

    def test_svg_contains_labels(self, simple_layout):
        """Node indices are used as labels."""
        svg = to_svg(simple_layout)

        assert svg.count("<text") == 5
        assert ">3</text>" in svg

    def test_svg_no_labels_when_disabled(self, simple_layout):
        """Labels can be switched off."""
        svg = to_svg(simple_layout, show_labels=False)
        assert "<text" not in svg

    def test_svg_named_labels_escaped(self, labeled_layout):
        """Node names are used and escaped."""
        svg = to_svg(labeled_layout)

        assert ">alpha</text>" in svg
        assert "b&lt;e&gt;ta" in svg

    def test_svg_custom_colors(self, simple_layout):
        """Colors are passed through."""
        svg = to_svg(simple_layout, node_color="#ff0000", edge_color="#00ff00")

        assert 'fill="#ff0000"' in svg
        assert 'stroke="#00ff00"' in svg

    def test_svg_background(self, simple_layout):
        """A background rectangle is drawn when requested."""
        svg = to_svg(simple_layout, background="#ffffff")
        assert '<rect width="100%" height="100%" fill="#ffffff"/>' in svg

    def test_svg_rect_nodes(self, simple_layout):
        """Nodes can be drawn as rectangles."""
        svg = to_svg(simple_layout, node_shape="rect")

        assert "<circle" not in svg
        assert svg.count('rx="4"') == 5

    def test_svg_empty_layout(self):
        """An empty layout gives an empty document."""
        svg = to_svg(CircularLayout(nodes=[]).run())

        assert "<circle" not in svg
        assert svg.endswith("</svg>")

    def test_svg_edge_through_bends(self):
        """Edges are drawn through their bend points."""
        layout = CircularLayout(nodes=[Node(), Node()], links=[Link(0, 1, bends=[(0, 50)])])
        layout.run()
        svg = to_svg(layout, padding=0, node_radius=0)

        polyline = next(line for line in svg.splitlines() if "<polyline" in line)
        assert polyline.count(",") == 3

    def test_svg_component_boxes(self, packed_layout):
        """Packed component boxes are drawn on request."""
        plain = to_svg(packed_layout)
        boxed = to_svg(packed_layout, show_boxes=True, box_color="#123456")

        assert 'class="components"' not in plain
        assert 'class="components"' in boxed
        assert boxed.count('stroke="#123456"') == 3

    def test_svg_boxes_ignored_for_plain_layouts(self, simple_layout):
        """Layouts without packed boxes draw no boxes."""
        svg = to_svg(simple_layout, show_boxes=True)
        assert 'class="components"' not in svg
