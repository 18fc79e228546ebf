"""Tests for packing independent trees side by side."""

import pytest

from perk_layout.layout.packing import pack
from perk_layout.parser.model import LayoutConfig, LayoutNode


def _node(node_id, x, y=0.0, width=140.0):
    return LayoutNode(id=node_id, x=x, y=y, width=width, height=80.0,
                      original_x=x, original_y=y)


def test_single_node_trees_keep_spacing():
    config = LayoutConfig()
    packed = pack([[_node("A", -70)], [_node("B", -70)]], config)
    a, b = packed
    assert a.x == 0
    assert b.x - (a.x + a.width) == pytest.approx(config.horizontal_spacing)


def test_original_x_follows_packed_x():
    packed = pack([[_node("A", -70)], [_node("B", -70)]], LayoutConfig())
    for node in packed:
        assert node.original_x == node.x


def test_root_width_scaling():
    """Two trees with equal root spans each get half the combined span."""
    config = LayoutConfig()
    first = [_node("r1", 0), _node("r2", 100)]
    second = [_node("s1", -100), _node("s2", 0)]
    packed = {n.id: n for n in pack([first, second], config)}

    assert packed["r1"].x == 0
    assert packed["r2"].x == pytest.approx(50)
    # First tree spans 50 + 140; the second starts one spacing later
    assert packed["s1"].x == pytest.approx(50 + 140 + 40)
    assert packed["s2"].x - packed["s1"].x == pytest.approx(50)


def test_single_root_tree_not_collapsed():
    """A tree with one root keeps its full width next to a wide-rooted tree."""
    config = LayoutConfig()
    wide = [_node("r1", -300), _node("r2", 300)]
    narrow = [_node("n", -70), _node("c1", -160, -200), _node("c2", 20, -200)]
    packed = {n.id: n for n in pack([wide, narrow], config)}
    assert packed["c2"].x - packed["c1"].x == pytest.approx(180)


def test_tree_bounding_boxes_do_not_overlap():
    config = LayoutConfig()
    trees = [
        [_node("a1", 0), _node("a2", 180), _node("a3", 90, -200)],
        [_node("b1", -70)],
        [_node("c1", 0), _node("c2", 500), _node("c3", 250, -200)],
    ]
    packed = pack(trees, config)
    boxes = []
    for tree in trees:
        ids = {n.id for n in tree}
        members = [n for n in packed if n.id in ids]
        boxes.append((min(n.x for n in members), max(n.x + n.width for n in members)))
    for (_, left_max), (right_min, _) in zip(boxes, boxes[1:]):
        assert right_min - left_max >= config.horizontal_spacing - 1e-9


def test_pack_preserves_y_and_order():
    trees = [[_node("A", 0), _node("B", 0, -200)], [_node("C", 0)]]
    packed = pack(trees, LayoutConfig())
    assert [n.id for n in packed] == ["A", "B", "C"]
    assert [n.y for n in packed] == [0, -200, 0]


def test_empty_input():
    assert pack([], LayoutConfig()) == []
    assert pack([[]], LayoutConfig()) == []
