"""Tests for subtree width computation and cycle detection."""

import pytest

from perk_layout.layout.widths import CycleDetected, LayoutError, SubtreeWidths, measure_node_width
from perk_layout.parser.model import GraphRecord, LayoutConfig, Tree


def _rec(node_id, parents=(), children=(), label=""):
    return GraphRecord(id=node_id, label=label or node_id, parents=tuple(parents),
                       children=tuple(children))


def _widths(records, config=None):
    return SubtreeWidths({r.id: r for r in records}, config or LayoutConfig())


def test_leaf_width_is_node_width():
    calc = _widths([_rec("A")])
    assert calc.width("A") == 140.0


def test_two_children_add_spacing():
    calc = _widths([
        _rec("A", children=["B", "C"]),
        _rec("B", parents=["A"]),
        _rec("C", parents=["A"]),
    ])
    assert calc.width("A") == 140 + 140 + 40


def test_single_child_floored_at_node_width():
    config = LayoutConfig(node_width=100)
    calc = _widths([_rec("A", children=["B"]), _rec("B", parents=["A"])], config)
    assert calc.width("A") == 100


def test_unknown_children_are_skipped():
    calc = _widths([_rec("A", children=["ghost", "B"]), _rec("B", parents=["A"])])
    assert calc.width("A") == 140


def test_diamond_is_not_a_cycle():
    """Siblings sharing a descendant must not trip cycle detection."""
    calc = _widths([
        _rec("A", children=["B", "C"]),
        _rec("B", parents=["A"], children=["D"]),
        _rec("C", parents=["A"], children=["D"]),
        _rec("D", parents=["B", "C"]),
    ])
    assert calc.width("A") == 320


def test_cycle_raises():
    calc = _widths([
        _rec("A", parents=["B"], children=["B"]),
        _rec("B", parents=["A"], children=["A"]),
    ])
    with pytest.raises(CycleDetected) as exc_info:
        calc.width("A")
    assert exc_info.value.node_id == "A"
    assert isinstance(exc_info.value, LayoutError)


def test_self_reference_raises():
    calc = _widths([_rec("A", parents=["A"], children=["A"])])
    with pytest.raises(CycleDetected):
        calc.width("A")


def test_widths_for_tree_covers_every_node():
    records = [
        _rec("A", children=["B", "C"]),
        _rec("B", parents=["A"]),
        _rec("C", parents=["A"]),
    ]
    tree = Tree(index=0, node_ids=("A", "B", "C"), roots=("A",))
    assert _widths(records).widths_for_tree(tree) == {"A": 320, "B": 140, "C": 140}


def test_measure_labels_widens_long_labels():
    config = LayoutConfig(measure_labels=True)
    long = _rec("A", label="x" * 30)
    short = _rec("B", label="ab")
    assert measure_node_width(long, config) == 30 * 8 + 24
    assert measure_node_width(short, config) == 140
    assert measure_node_width(long, LayoutConfig()) == 140
    assert _widths([long], config).width("A") == 264
