"""Hierarchical placement of one acyclic tree.

Depth bands map to Y (roots at 0, deeper bands further negative).
Bands are walked root-first so every parent already has its final X
when its immediate children are centered beneath it. Each child is
allocated to exactly one parent: the first by id among its in-tree
parents in the band directly above.
"""

from __future__ import annotations

__all__ = ["allocate_children", "place_tree"]

import logging
from collections import defaultdict

from perk_layout.layout.analysis import known_children, known_parents
from perk_layout.layout.widths import measure_node_width
from perk_layout.parser.model import GraphRecord, LayoutConfig, LayoutNode, Tree

logger = logging.getLogger(__name__)


def allocate_children(
    tree: Tree,
    records: dict[str, GraphRecord],
    depth_of: dict[str, int],
) -> dict[str, list[str]]:
    """Map each parent to the children whose width it owns.

    A child qualifies under a parent when it sits exactly one band
    below and that parent is the lexicographically first of its
    immediate parents. Children keep their declared order.
    """
    members = set(tree.node_ids)
    owner: dict[str, str] = {}
    for nid in tree.node_ids:
        immediate = [
            p
            for p in known_parents(records[nid], members)
            if depth_of[p] == depth_of[nid] - 1
        ]
        if immediate:
            owner[nid] = min(immediate)

    allocated: dict[str, list[str]] = defaultdict(list)
    for nid in tree.node_ids:
        seen: set[str] = set()
        for child in known_children(records[nid], members):
            if child in seen:
                continue
            seen.add(child)
            if owner.get(child) == nid:
                allocated[nid].append(child)
    return allocated


def place_tree(
    tree: Tree,
    records: dict[str, GraphRecord],
    depth_of: dict[str, int],
    widths: dict[str, float],
    config: LayoutConfig,
) -> list[LayoutNode]:
    """Place an acyclic tree and return its nodes sorted by id.

    Args:
        tree: The tree to place.
        records: All input records by id.
        depth_of: Depth band per node from analyze().
        widths: Subtree width per node from SubtreeWidths.
        config: Layout distances.
    """
    nodes: dict[str, LayoutNode] = {}
    for nid in tree.node_ids:
        record = records[nid]
        depth = depth_of[nid]
        y = -depth * config.vertical_spacing
        nodes[nid] = LayoutNode(
            id=nid,
            y=y,
            width=measure_node_width(record, config),
            height=config.node_height,
            original_y=y,
            children=tuple(record.children),
            depth=depth,
        )

    centers: dict[str, float] = {}

    # Roots side by side, centered on x = 0
    root_ids = sorted(nid for nid in tree.node_ids if depth_of[nid] == 0)
    _center_row(root_ids, 0.0, widths, config, centers)

    allocated = allocate_children(tree, records, depth_of)
    members = set(tree.node_ids)

    bands: dict[int, list[str]] = defaultdict(list)
    for nid in tree.node_ids:
        bands[depth_of[nid]].append(nid)

    for depth in sorted(bands):
        for nid in sorted(bands[depth]):
            if nid not in centers:
                # No parent in the adjacent band: follow the deepest parent
                parents = known_parents(records[nid], members)
                placed = [p for p in parents if p in centers]
                if placed:
                    anchor = min(placed, key=lambda p: (-depth_of[p], p))
                    centers[nid] = centers[anchor]
                else:
                    centers[nid] = 0.0
            kids = allocated.get(nid)
            if kids:
                _center_row(kids, centers[nid], widths, config, centers)

    for nid, node in nodes.items():
        node.x = centers[nid] - node.width / 2
        node.original_x = node.x

    logger.debug(
        "Placed tree %d: %d nodes across %d bands", tree.index, len(nodes), len(bands)
    )
    return [nodes[nid] for nid in sorted(nodes)]


def _center_row(
    ids: list[str],
    center: float,
    widths: dict[str, float],
    config: LayoutConfig,
    centers: dict[str, float],
) -> None:
    """Lay *ids* out left to right in slots centered on *center*."""
    total = sum(widths[i] for i in ids) + (len(ids) - 1) * config.horizontal_spacing
    cursor = center - total / 2
    for i in ids:
        centers[i] = cursor + widths[i] / 2
        cursor += widths[i] + config.horizontal_spacing

