"""Tests for input validation module."""

import pytest

from graph_packing import CircularLayout, Link, Node
from graph_packing.geometry import IPoint
from graph_packing.validation import (
    InvalidBorderError,
    InvalidLinkError,
    InvalidNodeError,
    InvalidRatioError,
    PackingError,
    ValidationError,
    validate_border,
    validate_link_indices,
    validate_offsets,
    validate_target_ratio,
)


class TestTargetRatioValidation:
    """Tests for target aspect ratio validation."""

    def test_valid_ratio(self):
        """Positive ratios are returned as float."""
        assert validate_target_ratio(1) == 1.0
        assert isinstance(validate_target_ratio(2), float)

    def test_small_ratio(self):
        """Very tall targets are allowed."""
        assert validate_target_ratio(0.01) == 0.01

    def test_zero_ratio(self):
        """A zero ratio is allowed."""
        assert validate_target_ratio(0) == 0.0

    def test_negative_raises(self):
        """Negative ratios are rejected."""
        with pytest.raises(InvalidRatioError, match=">= 0"):
            validate_target_ratio(-1.5)

    def test_non_finite_raises(self):
        """Infinite and NaN ratios are rejected."""
        for value in (float("inf"), float("nan")):
            with pytest.raises(InvalidRatioError):
                validate_target_ratio(value)

    def test_is_value_error(self):
        """Validation errors are ValueErrors."""
        with pytest.raises(ValueError):
            validate_target_ratio(-0.5)


class TestBorderValidation:
    """Tests for component border validation."""

    def test_valid_border(self):
        """Non-negative integers are accepted."""
        assert validate_border(30) == 30
        assert validate_border(0) == 0

    def test_integral_float(self):
        """Integral floats are converted."""
        assert validate_border(12.0) == 12

    def test_fractional_float_raises(self):
        """Fractional borders are rejected."""
        with pytest.raises(InvalidBorderError):
            validate_border(2.5)

    def test_negative_raises(self):
        """Negative borders are rejected."""
        with pytest.raises(InvalidBorderError, match=">= 0"):
            validate_border(-1)


class TestLinkValidation:
    """Tests for link index validation."""

    def test_valid_links(self):
        """Valid links pass validation."""
        links = [{"source": 0, "target": 1}, {"source": 1, "target": 2}]
        assert validate_link_indices(links, 3) == []

    def test_valid_links_with_node_objects(self):
        """Links referencing Node objects are checked by index."""
        a, b = Node(index=0), Node(index=1)
        assert validate_link_indices([Link(a, b)], 2) == []

    def test_out_of_bounds_source_strict(self):
        """Out of bounds source raises in strict mode."""
        with pytest.raises(InvalidLinkError, match="source index 5"):
            validate_link_indices([{"source": 5, "target": 0}], 3)

    def test_out_of_bounds_target_strict(self):
        """Out of bounds target raises in strict mode."""
        with pytest.raises(InvalidLinkError, match="target index 3"):
            validate_link_indices([{"source": 0, "target": 3}], 3)

    def test_negative_source_raises(self):
        """Negative indices are out of bounds."""
        with pytest.raises(InvalidLinkError):
            validate_link_indices([{"source": -1, "target": 0}], 3)

    def test_non_strict_returns_issues(self):
        """Non-strict mode reports issues instead of raising."""
        issues = validate_link_indices(
            [{"source": 0, "target": 1}, {"source": 9, "target": 8}], 3, strict=False
        )

        assert len(issues) == 2
        assert all(i == 1 for i, _ in issues)

    def test_missing_endpoint_reported(self):
        """Dicts without an endpoint are reported."""
        issues = validate_link_indices([{"source": 0}], 3, strict=False)
        assert issues == [(0, "Link 0: target is None")]

    def test_empty_links_valid(self):
        """No links, no issues."""
        assert validate_link_indices([], 0) == []


class TestOffsetValidation:
    """Tests for packer result validation."""

    def test_matching_count(self):
        """One offset per box passes."""
        validate_offsets([IPoint(0, 0), IPoint(1, 0)], 2)

    def test_mismatch_raises(self):
        """Missing or extra offsets raise PackingError."""
        with pytest.raises(PackingError, match="1 offset"):
            validate_offsets([IPoint(0, 0)], 2)
        with pytest.raises(PackingError):
            validate_offsets([IPoint(0, 0)] * 3, 2)

    def test_not_a_validation_error(self):
        """Packer failures are runtime errors, not input errors."""
        assert not issubclass(PackingError, ValidationError)


class TestLinkConstructorValidation:
    """Tests for Link constructor validation."""

    def test_link_none_source_raises(self):
        """None source raises."""
        with pytest.raises(ValueError, match="source"):
            Link(None, 1)

    def test_link_none_target_raises(self):
        """None target raises."""
        with pytest.raises(ValueError, match="target"):
            Link(0, None)

    def test_link_bends_converted(self):
        """Bend points are stored as float pairs."""
        link = Link(0, 1, bends=[[1, 2], (3, 4)])
        assert link.bends == [(1.0, 2.0), (3.0, 4.0)]


class TestBaseLayoutValidation:
    """Tests for validation through layout objects."""

    def test_none_node_rejected(self):
        """None entries in the node list are rejected."""
        with pytest.raises(InvalidNodeError):
            CircularLayout(nodes=[{}, None])

    def test_validate_method_catches_bad_links(self):
        """validate() raises for links to missing nodes."""
        layout = CircularLayout(nodes=[{}, {}], links=[{"source": 0, "target": 2}])
        with pytest.raises(InvalidLinkError):
            layout.validate()

    def test_validate_method_passes_valid_config(self):
        """validate() returns the layout for chaining."""
        layout = CircularLayout(nodes=[{}, {}], links=[{"source": 0, "target": 1}])
        assert layout.validate() is layout
