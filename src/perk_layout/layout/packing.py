"""Pack independently laid-out trees side by side.

Each tree's horizontal geometry is scaled by its share of the combined
root band width, then shifted right of the previous tree.
"""

from __future__ import annotations

__all__ = ["pack"]

import logging
from dataclasses import dataclass

from perk_layout.layout.constants import ROOT_BAND_TOLERANCE
from perk_layout.parser.model import LayoutConfig, LayoutNode

logger = logging.getLogger(__name__)


@dataclass
class _TreeExtent:
    nodes: list[LayoutNode]
    min_root_x: float
    max_root_x: float
    min_x: float
    max_left_x: float
    max_node_width: float

    @property
    def root_width(self) -> float:
        return self.max_root_x - self.min_root_x


def _measure(nodes: list[LayoutNode]) -> _TreeExtent:
    max_y = max(n.y for n in nodes)
    root_xs = [n.x for n in nodes if abs(n.y - max_y) < ROOT_BAND_TOLERANCE]
    return _TreeExtent(
        nodes=nodes,
        min_root_x=min(root_xs),
        max_root_x=max(root_xs),
        min_x=min(n.x for n in nodes),
        max_left_x=max(n.x for n in nodes),
        max_node_width=max(n.width for n in nodes),
    )


def pack(tree_layouts: list[list[LayoutNode]], config: LayoutConfig) -> list[LayoutNode]:
    """Lay trees out left to right and return one flat node list.

    ``original_x`` follows the packed ``x``. Empty tree layouts are
    skipped.
    """
    extents = [_measure(nodes) for nodes in tree_layouts if nodes]
    if not extents:
        return []

    all_min_root = min(e.min_root_x for e in extents)
    all_max_root = max(e.max_root_x for e in extents)
    total_root_width = all_max_root - all_min_root

    packed: list[LayoutNode] = []
    cursor = 0.0
    for extent in extents:
        if total_root_width > 0 and extent.root_width > 0:
            scale = extent.root_width / total_root_width
        else:
            scale = 1.0

        for node in extent.nodes:
            node.x = cursor + (node.x - extent.min_x) * scale
            node.original_x = node.x
            packed.append(node)

        scaled_width = (extent.max_left_x - extent.min_x) * scale + extent.max_node_width
        cursor += scaled_width + config.horizontal_spacing

    logger.debug("Packed %d trees, total width %.1f", len(extents), cursor)
    return packed
