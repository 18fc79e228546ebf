"""Fallback placement for trees that contain cycles."""

from __future__ import annotations

__all__ = ["position_cyclic", "zeroed_layout"]

import logging

from perk_layout.layout.forces import relax_cyclic
from perk_layout.layout.widths import measure_node_width
from perk_layout.parser.model import GraphRecord, LayoutConfig, LayoutNode, Tree

logger = logging.getLogger(__name__)


def position_cyclic(
    tree: Tree,
    records: dict[str, GraphRecord],
    config: LayoutConfig,
) -> list[LayoutNode]:
    """Seed nodes from their grid positions, then separate them vertically.

    Grid row 0 maps to the root band and higher rows grow upward, the
    same direction as deeper hierarchical bands.
    """
    if not tree.node_ids:
        raise ValueError(f"Tree {tree.index} has no nodes to position")

    nodes: list[LayoutNode] = []
    for nid in tree.node_ids:
        record = records[nid]
        x = record.seed_position.x * config.grid_scale_x
        y = -record.seed_position.y * config.grid_scale_y
        nodes.append(
            LayoutNode(
                id=nid,
                x=x,
                y=y,
                width=measure_node_width(record, config),
                height=config.node_height,
                original_x=x,
                original_y=y,
                children=tuple(record.children),
            )
        )

    logger.debug("Seeded %d nodes of cyclic tree %d from grid", len(nodes), tree.index)
    return relax_cyclic(nodes, config)


def zeroed_layout(records: list[GraphRecord], config: LayoutConfig) -> list[LayoutNode]:
    """Last-resort layout: every node at the origin with default size."""
    return [
        LayoutNode(
            id=record.id,
            width=config.node_width,
            height=config.node_height,
            children=tuple(record.children),
        )
        for record in records
    ]
