"""Tests for moving centred component points into the packed drawing."""

import math

import pytest

from graph_packing import Link, Node
from graph_packing.geometry import DPoint, IPoint
from graph_packing.splitter import (
    ComponentGeometry,
    PointRecord,
    inverse_transform_point,
    reassemble,
    transform_point,
)


def make_geometry(rotation=0.0, corrective=(0.0, 0.0)):
    return ComponentGeometry(
        rotation=rotation,
        width=10.0,
        height=5.0,
        corrective=DPoint(*corrective),
        border=30,
    )


class TestTransformPoint:
    """Tests for the per-point transform."""

    def test_translation_only(self):
        """Without rotation the point is offset and corrected."""
        geometry = make_geometry(corrective=(-15.0, -20.0))
        x, y = transform_point(2.0, 3.0, geometry, IPoint(100, 50))

        assert (x, y) == pytest.approx((117.0, 73.0))

    def test_rotation_applied_before_offset(self):
        """The point is rotated around the origin, then translated."""
        geometry = make_geometry(rotation=math.pi / 2)
        x, y = transform_point(1.0, 0.0, geometry, IPoint(10, 20))

        assert x == pytest.approx(10.0)
        assert y == pytest.approx(21.0)

    def test_origin_lands_at_offset_minus_corrective(self):
        """The centroid maps to offset - corrective for any rotation."""
        geometry = make_geometry(rotation=1.1, corrective=(-7.5, 3.25))
        x, y = transform_point(0.0, 0.0, geometry, IPoint(40, 60))

        assert (x, y) == pytest.approx((47.5, 56.75))

    @pytest.mark.parametrize("rotation", [0.0, 0.3, math.pi / 2, 2.5, 4.0, 2.5 * math.pi])
    def test_inverse_restores_point(self, rotation):
        """The inverse transform gives back the centred point."""
        geometry = make_geometry(rotation=rotation, corrective=(-12.3, -40.1))
        offset = IPoint(71, 29)

        for px, py in [(0.0, 0.0), (3.0, -4.0), (-12.5, 7.25), (100.0, 0.001)]:
            x, y = transform_point(px, py, geometry, offset)
            back = inverse_transform_point(x, y, geometry, offset)
            assert back == pytest.approx((px, py), abs=1e-9)

    def test_distances_preserved(self):
        """Rigid motion keeps distances between points."""
        geometry = make_geometry(rotation=0.7, corrective=(5.0, 5.0))
        offset = IPoint(3, 9)

        a = transform_point(0.0, 0.0, geometry, offset)
        b = transform_point(3.0, 4.0, geometry, offset)
        assert math.dist(a, b) == pytest.approx(5.0)


class TestReassemble:
    """Tests for in-place reassembly of records."""

    def test_updates_nodes_and_bends(self):
        """Every record of the component is moved."""
        node = Node(x=1.0, y=2.0)
        link = Link(0, 0, bends=[(3.0, 4.0)])
        records = [PointRecord(node), PointRecord(link, 0)]
        geometry = make_geometry(corrective=(-1.0, -1.0))

        reassemble(records, geometry, IPoint(10, 10))

        assert (node.x, node.y) == pytest.approx((12.0, 13.0))
        assert link.bends[0] == pytest.approx((14.0, 15.0))

    def test_empty_records(self):
        """Nothing to move is not an error."""
        reassemble([], make_geometry(), IPoint(0, 0))
