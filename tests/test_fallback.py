"""Tests for the cyclic fallback positioner."""

import pytest

from perk_layout.layout.fallback import position_cyclic, zeroed_layout
from perk_layout.parser.model import GraphRecord, GridPosition, LayoutConfig, Tree


def _rec(node_id, x, y, parents=(), children=()):
    return GraphRecord(id=node_id, label=node_id, parents=tuple(parents),
                       children=tuple(children), seed_position=GridPosition(x, y))


def test_seeds_from_grid_positions():
    records = {
        "A": _rec("A", 0, 0, parents=["B"], children=["B"]),
        "B": _rec("B", 2, 1, parents=["A"], children=["A"]),
    }
    tree = Tree(index=0, node_ids=("A", "B"), roots=(), cyclic=True)
    nodes = {n.id: n for n in position_cyclic(tree, records, LayoutConfig())}

    assert (nodes["A"].x, nodes["A"].y) == (0, 0)
    assert (nodes["B"].x, nodes["B"].y) == (360, -120)
    assert nodes["A"].depth is None
    assert nodes["B"].children == ("A",)


def test_crowded_seeds_are_separated():
    records = {
        "A": _rec("A", 0, 0, children=["A"], parents=["A"]),
        "B": _rec("B", 0, 0),
    }
    tree = Tree(index=0, node_ids=("A", "B"), roots=(), cyclic=True)
    nodes = position_cyclic(tree, records, LayoutConfig())
    assert abs(nodes[0].y - nodes[1].y) > 0


def test_empty_tree_raises():
    tree = Tree(index=3, node_ids=(), roots=(), cyclic=True)
    with pytest.raises(ValueError):
        position_cyclic(tree, {}, LayoutConfig())


def test_zeroed_layout_uses_default_size():
    config = LayoutConfig(node_width=100, node_height=50)
    nodes = zeroed_layout([_rec("A", 3, 4), _rec("B", 1, 1)], config)
    assert [n.id for n in nodes] == ["A", "B"]
    for node in nodes:
        assert (node.x, node.y, node.width, node.height) == (0, 0, 100, 50)
