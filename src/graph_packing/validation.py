"""
Input validation utilities for component packing.

Provides centralized validation functions for links, packing parameters
and packer results. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class InvalidNodeError(ValidationError):
    """Raised when a node is malformed."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when a link references invalid nodes."""

    pass


class InvalidRatioError(ValidationError):
    """Raised when a target aspect ratio is negative or not finite."""

    pass


class InvalidBorderError(ValidationError):
    """Raised when a component border is negative."""

    pass


class PackingError(RuntimeError):
    """Raised when a packer breaks its result contract."""

    pass


def validate_link_indices(
    links: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all link source/target indices are within bounds.

    Args:
        links: Sequence of Link objects or dicts with source/target
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (link_index, issue_description) tuples

    Raises:
        InvalidLinkError: If strict=True and invalid links found
    """
    issues: list[tuple[int, str]] = []

    for i, link in enumerate(links):
        src = _get_index(link, "source")
        tgt = _get_index(link, "target")

        if src is None:
            issues.append((i, f"Link {i}: source is None"))
        elif src < 0 or src >= node_count:
            issues.append((i, f"Link {i}: source index {src} out of bounds [0, {node_count})"))

        if tgt is None:
            issues.append((i, f"Link {i}: target is None"))
        elif tgt < 0 or tgt >= node_count:
            issues.append((i, f"Link {i}: target index {tgt} out of bounds [0, {node_count})"))

    if strict and issues:
        msg = "Invalid link indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidLinkError(msg)

    return issues


def validate_target_ratio(ratio: float) -> float:
    """
    Validate a target aspect ratio (width / height).

    Args:
        ratio: Desired width / height of the packed drawing

    Returns:
        Validated ratio as float

    Raises:
        InvalidRatioError: If ratio is negative or not finite
    """
    value = float(ratio)
    if not math.isfinite(value) or value < 0:
        raise InvalidRatioError(f"target ratio must be >= 0 and finite, got {ratio}")
    return value


def validate_border(border: int) -> int:
    """
    Validate the padding added around every component box.

    Args:
        border: Total padding added to width and height of each box

    Returns:
        Validated border as int

    Raises:
        InvalidBorderError: If border is negative or not integral
    """
    if isinstance(border, float) and not border.is_integer():
        raise InvalidBorderError(f"border must be an integer, got {border}")
    value = int(border)
    if value < 0:
        raise InvalidBorderError(f"border must be >= 0, got {border}")
    return value


def validate_offsets(offsets: Sequence[Any], box_count: int) -> None:
    """
    Check that a packer returned exactly one offset per box.

    Args:
        offsets: Offsets returned by the packer
        box_count: Number of boxes handed to the packer

    Raises:
        PackingError: If the counts differ
    """
    if len(offsets) != box_count:
        raise PackingError(
            f"Packer returned {len(offsets)} offset(s) for {box_count} box(es)"
        )


def _get_index(obj: Any, attr: str) -> Optional[int]:
    """Extract index from int, Node, or object with index attribute."""
    if hasattr(obj, attr):
        val = getattr(obj, attr, None)
    elif isinstance(obj, dict):
        val = obj.get(attr)
    else:
        val = None

    if val is None:
        return None
    if isinstance(val, int):
        return val
    if hasattr(val, "index") and val.index is not None:
        return int(val.index)
    return None


__all__ = [
    "ValidationError",
    "InvalidNodeError",
    "InvalidLinkError",
    "InvalidRatioError",
    "InvalidBorderError",
    "PackingError",
    "validate_link_indices",
    "validate_target_ratio",
    "validate_border",
    "validate_offsets",
]
