"""Layout coordinator: combines analysis, placement, packing, and relaxation.

Per tree:
    Unprocessed -> WidthComputed -> HierarchicallyPlaced -> Relaxed -> Packed
    Unprocessed -> CycleDetected -> FallbackPlaced -> Relaxed -> Packed

Trees are packed side by side and a final mild relaxation runs over the
whole graph. The public functions never raise for bad graph data.
"""

from __future__ import annotations

__all__ = ["compute_layout", "layout"]

import logging

from perk_layout.layout.analysis import analyze
from perk_layout.layout.fallback import position_cyclic, zeroed_layout
from perk_layout.layout.forces import relax
from perk_layout.layout.hierarchy import place_tree
from perk_layout.layout.packing import pack
from perk_layout.layout.widths import CycleDetected, SubtreeWidths
from perk_layout.parser.model import (
    GraphRecord,
    LayoutConfig,
    LayoutNode,
    LayoutResult,
    Tree,
)

logger = logging.getLogger(__name__)


def layout(
    records: list[GraphRecord],
    config: LayoutConfig | None = None,
) -> list[LayoutNode]:
    """Compute positions for every record. See compute_layout()."""
    return compute_layout(records, config).nodes


def compute_layout(
    records: list[GraphRecord],
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Compute positions for every record, with fallback diagnostics.

    Records are processed in id order, so the result does not depend
    on input order. Cyclic trees are positioned from their seed grid
    positions and reported in ``fallback_trees``.
    """
    if config is None:
        config = LayoutConfig()
    if not records:
        return LayoutResult()

    ordered = sorted(records, key=lambda r: r.id)
    try:
        return _compute(ordered, config)
    except Exception:
        logger.exception("Layout of %d records failed; using zeroed layout", len(ordered))
        return LayoutResult(nodes=zeroed_layout(ordered, config), degraded=True)


def _compute(records: list[GraphRecord], config: LayoutConfig) -> LayoutResult:
    by_id = {r.id: r for r in records}
    analysis = analyze(records)
    widths = SubtreeWidths(by_id, config)
    result = LayoutResult()

    tree_layouts: list[list[LayoutNode]] = []
    for tree in analysis.trees:
        nodes = _layout_tree(tree, by_id, analysis.depth_of, widths, config, result)
        tree_layouts.append(nodes)

    result.nodes = relax(pack(tree_layouts, config), config)
    return result


def _layout_tree(
    tree: Tree,
    by_id: dict[str, GraphRecord],
    depth_of: dict[str, int],
    widths: SubtreeWidths,
    config: LayoutConfig,
    result: LayoutResult,
) -> list[LayoutNode]:
    """Run one tree through the hierarchical or fallback path."""
    if not tree.cyclic:
        try:
            tree_widths = widths.widths_for_tree(tree)
        except CycleDetected as e:
            logger.debug("Tree %d: %s", tree.index, e)
        else:
            nodes = place_tree(tree, by_id, depth_of, tree_widths, config)
            return relax(nodes, config)

    logger.warning(
        "Tree %d (%d nodes, first %r) contains a cycle; using grid fallback layout",
        tree.index,
        len(tree.node_ids),
        tree.node_ids[0],
    )
    result.fallback_trees.append(tree.node_ids)
    try:
        return position_cyclic(tree, by_id, config)
    except Exception:
        logger.exception("Fallback layout failed for tree %d", tree.index)
        result.degraded = True
        return zeroed_layout([by_id[nid] for nid in tree.node_ids], config)
