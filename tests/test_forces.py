"""Tests for the relaxation passes."""

import pytest

from perk_layout.layout.forces import relax, relax_cyclic
from perk_layout.parser.model import LayoutConfig, LayoutNode


def _node(node_id, x, y, depth=None):
    return LayoutNode(id=node_id, x=x, y=y, width=140.0, height=80.0, depth=depth)


def test_relax_snapshots_original_position():
    nodes = [_node("A", 10, -200, depth=1), _node("B", 500, 0, depth=0)]
    relax(nodes, LayoutConfig())
    assert (nodes[0].original_x, nodes[0].original_y) == (10, -200)
    assert (nodes[1].original_x, nodes[1].original_y) == (500, 0)


def test_relax_leaves_spread_nodes_alone():
    nodes = [_node("A", 0, 0, depth=0), _node("B", 180, 0, depth=0)]
    relax(nodes, LayoutConfig())
    assert (nodes[0].x, nodes[0].y) == (0, 0)
    assert (nodes[1].x, nodes[1].y) == (180, 0)


def test_relax_pushes_close_nodes_apart():
    nodes = [_node("A", 0, 0, depth=0), _node("B", 5, 0, depth=0)]
    result = relax(nodes, LayoutConfig())
    assert result is nodes
    assert nodes[0].x < 0
    assert nodes[1].x > 5
    # Mild: a handful of small steps, not a re-layout
    assert nodes[1].x - nodes[0].x < 6


def test_relax_clamps_to_depth_band():
    """A node nudged toward the root band is pulled back to its band."""
    nodes = [_node("A", 0, -190, depth=1)]
    relax(nodes, LayoutConfig())
    assert nodes[0].y == -200


def test_relax_does_not_clamp_fallback_nodes():
    nodes = [_node("A", 0, -190)]
    relax(nodes, LayoutConfig())
    assert nodes[0].y == -190


def test_relax_ignores_coincident_nodes():
    """Zero distance gives no direction to push along."""
    nodes = [_node("A", 0, 0, depth=0), _node("B", 0, 0, depth=0)]
    relax(nodes, LayoutConfig())
    assert nodes[0].x == nodes[1].x == 0


def test_relax_cyclic_separates_stacked_nodes():
    nodes = [_node("A", 0, 0), _node("B", 0, 0)]
    relax_cyclic(nodes, LayoutConfig())
    separation = abs(nodes[0].center_y - nodes[1].center_y)
    assert separation > 80 * 0.8
    # Only Y moves
    assert nodes[0].x == nodes[1].x == 0


def test_relax_cyclic_separates_rows_without_overlap():
    """Nodes on the same row are pulled apart even when far apart horizontally."""
    nodes = [_node("A", 0, 0), _node("B", 1000, 0)]
    relax_cyclic(nodes, LayoutConfig())
    assert nodes[0].y != nodes[1].y
    assert abs(nodes[0].y - nodes[1].y) == pytest.approx(64, abs=5)


def test_relax_cyclic_upper_node_moves_up():
    nodes = [_node("A", 0, -30), _node("B", 0, 0)]
    relax_cyclic(nodes, LayoutConfig())
    assert nodes[0].y < -30
    assert nodes[1].y > 0


def test_relax_cyclic_leaves_separated_nodes_alone():
    nodes = [_node("A", 0, 0), _node("B", 0, -120)]
    relax_cyclic(nodes, LayoutConfig())
    assert (nodes[0].y, nodes[1].y) == (0, -120)
