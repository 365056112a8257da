#!/usr/bin/env python3
"""
Visualization script for component packing.

Packs a disconnected sample graph at several target aspect ratios and
writes the drawings, with their component boxes, into ./build/

Usage:
    uv run python scripts/visualize.py
"""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from graph_packing import CircularLayout, ComponentSplitterLayout

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

TARGET_RATIOS = [0.5, 1.0, 2.0, 4.0]


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def visualize(layout, title="Packed Layout", ax=None):
    """Draw a packed layout and its component boxes on an axis."""
    nodes = layout.nodes

    for offset, box in zip(layout.offsets, layout.boxes):
        ax.add_patch(
            Rectangle(
                (offset.x, offset.y),
                box.x,
                box.y,
                fill=False,
                edgecolor="indianred",
                linestyle="--",
                linewidth=1,
            )
        )

    # Draw edges through their bends
    for link in layout.links:
        src_idx = link.source if isinstance(link.source, int) else link.source.index
        tgt_idx = link.target if isinstance(link.target, int) else link.target.index
        points = [(nodes[src_idx].x, nodes[src_idx].y)] + link.bends
        points.append((nodes[tgt_idx].x, nodes[tgt_idx].y))
        ax.plot(
            [p[0] for p in points],
            [p[1] for p in points],
            "gray",
            alpha=0.5,
            linewidth=1,
        )

    xs = [n.x for n in nodes]
    ys = [n.y for n in nodes]
    ax.scatter(xs, ys, s=40, c="steelblue", zorder=5, edgecolors="white", linewidth=1)

    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_aspect("equal")
    ax.invert_yaxis()
    ax.axis("off")


def create_sample_graph():
    """Rings, paths and isolated nodes of different sizes."""
    nodes = [{} for _ in range(40)]
    links = []

    def ring(start, size):
        for i in range(size):
            links.append({"source": start + i, "target": start + (i + 1) % size})

    def path(start, size):
        for i in range(size - 1):
            links.append({"source": start + i, "target": start + i + 1})

    ring(0, 10)
    ring(10, 6)
    ring(16, 4)
    path(20, 8)
    path(28, 5)
    path(33, 3)
    # Nodes 36-39 stay isolated
    return nodes, links


def save_comparison(nodes, links, filename, title):
    """Pack the graph once per target ratio and save a comparison image."""
    fig, axes = plt.subplots(1, len(TARGET_RATIOS), figsize=(5 * len(TARGET_RATIOS), 5))

    for ax, ratio in zip(axes, TARGET_RATIOS):
        layout = ComponentSplitterLayout(
            nodes=[dict(n) for n in nodes],
            links=[dict(link) for link in links],
            secondary_layout=CircularLayout(node_spacing=40),
            target_ratio=ratio,
        ).run()
        visualize(layout, f"target ratio {ratio}", ax=ax)

    fig.suptitle(title, fontsize=14, fontweight="bold")
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def generate_all():
    """Generate all visualization images."""
    ensure_build_dir()

    nodes, links = create_sample_graph()
    print("Generating packing comparison...")
    save_comparison(nodes, links, "comparison_target_ratio.png", "Component Packing")

    print()
    print(f"All images saved to: {BUILD_DIR.absolute()}")


if __name__ == "__main__":
    generate_all()
