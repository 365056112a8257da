"""
Tests for the circular layout.
"""

import math

import pytest

from graph_packing.circular import CircularLayout

# =============================================================================
# Test Fixtures
# =============================================================================


def create_simple_graph():
    """Create a simple graph with 5 nodes."""
    nodes = [{} for _ in range(5)]
    links = [
        {"source": 0, "target": 1},
        {"source": 1, "target": 2},
        {"source": 2, "target": 3},
        {"source": 3, "target": 4},
        {"source": 4, "target": 0},
    ]
    return nodes, links


def create_star_graph():
    """Create a star graph with center at 0."""
    nodes = [{} for _ in range(6)]
    links = [{"source": 0, "target": i} for i in range(1, 6)]
    return nodes, links


# =============================================================================
# Circular Layout Tests
# =============================================================================


class TestCircularLayout:
    """Tests for Circular layout."""

    def test_basic_layout(self):
        """Test basic layout runs without error."""
        nodes, links = create_simple_graph()
        layout = CircularLayout(nodes=nodes, links=links)
        layout.run()

        assert len(layout.nodes) == 5
        assert [n.index for n in layout.nodes] == [0, 1, 2, 3, 4]

    def test_nodes_on_circle(self):
        """All nodes are at the same distance from the origin."""
        nodes, links = create_simple_graph()
        layout = CircularLayout(nodes=nodes, links=links, radius=120).run()

        for node in layout.nodes:
            assert math.hypot(node.x, node.y) == pytest.approx(120.0)

    def test_radius_from_spacing(self):
        """Without a radius neighbours are node_spacing apart along the circle."""
        nodes, links = create_simple_graph()
        layout = CircularLayout(nodes=nodes, links=links, node_spacing=60).run()

        radius = 5 * 60 / (2 * math.pi)
        assert math.hypot(layout.nodes[0].x, layout.nodes[0].y) == pytest.approx(radius)

    def test_even_spacing(self):
        """Consecutive nodes are separated by equal angles."""
        nodes, links = create_simple_graph()
        layout = CircularLayout(nodes=nodes, links=links, radius=100).run()

        angles = [math.atan2(n.y, n.x) % (2 * math.pi) for n in layout.nodes]
        for a, b in zip(angles, angles[1:]):
            assert (b - a) % (2 * math.pi) == pytest.approx(2 * math.pi / 5)

    def test_start_angle(self):
        """The first node is placed at start_angle."""
        nodes, links = create_simple_graph()
        layout = CircularLayout(
            nodes=nodes, links=links, radius=10, start_angle=math.pi / 2
        ).run()

        assert layout.nodes[0].x == pytest.approx(0.0, abs=1e-9)
        assert layout.nodes[0].y == pytest.approx(10.0)

    def test_configuration_properties(self):
        """Properties can be read and changed."""
        layout = CircularLayout(radius=50, node_spacing=20, start_angle=1.0, sort_by="degree")

        assert layout.radius == 50.0
        assert layout.node_spacing == 20.0
        assert layout.start_angle == 1.0
        assert layout.sort_by == "degree"

        layout.radius = None
        assert layout.radius is None

    def test_sort_by_degree(self):
        """The highest-degree node comes first."""
        nodes, links = create_star_graph()
        layout = CircularLayout(nodes=nodes, links=links, radius=10, sort_by="degree").run()

        # Hub takes the start angle
        assert layout.nodes[0].x == pytest.approx(10.0)
        assert layout.nodes[0].y == pytest.approx(0.0, abs=1e-9)

    def test_custom_sort_function(self):
        """A callable sort key orders the nodes."""
        nodes, links = create_simple_graph()
        layout = CircularLayout(
            nodes=nodes, links=links, radius=10, sort_by=lambda n: -n.index
        ).run()

        assert layout.nodes[4].x == pytest.approx(10.0)

    def test_single_node(self):
        """A single node sits at the origin."""
        layout = CircularLayout(nodes=[{"x": 5, "y": 5}]).run()

        assert (layout.nodes[0].x, layout.nodes[0].y) == (0.0, 0.0)

    def test_empty_graph(self):
        """Empty graph is handled."""
        layout = CircularLayout(nodes=[], links=[]).run()
        assert len(layout.nodes) == 0

    def test_reusable_for_several_graphs(self):
        """The same instance can lay out one graph after another."""
        layout = CircularLayout(radius=10)

        layout.nodes = [{}, {}, {}]
        layout.links = []
        layout.run()
        assert len(layout.nodes) == 3

        layout.nodes = [{}, {}]
        layout.run()
        assert layout.nodes[1].x == pytest.approx(-10.0)
