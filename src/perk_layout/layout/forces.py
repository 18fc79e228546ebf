"""Force-based relaxation passes.

``relax`` is the mild pass used for hierarchical output: short-range
repulsion between nearly coincident nodes followed by a weak pull back
to the pre-relaxation position. ``relax_cyclic`` is the stronger,
vertical-only variant used for trees without a usable depth order.

Both iterate pairs in list order, so callers must pass nodes in a
deterministic (id-sorted or packed) order. Pairwise passes are O(n^2).
"""

from __future__ import annotations

__all__ = ["relax", "relax_cyclic"]

import logging
import math

from perk_layout.layout.constants import (
    CYCLIC_ATTRACTION,
    CYCLIC_FORCE,
    CYCLIC_MAX_ITERATIONS,
    CYCLIC_MIN_SEPARATION_RATIO,
    RELAX_ATTRACTION,
    RELAX_FORCE,
    RELAX_ITERATIONS,
    RELAX_MIN_DISTANCE_RATIO,
)
from perk_layout.parser.model import LayoutConfig, LayoutNode

logger = logging.getLogger(__name__)


def _snapshot(nodes: list[LayoutNode]) -> None:
    for node in nodes:
        node.original_x = node.x
        node.original_y = node.y


def relax(nodes: list[LayoutNode], config: LayoutConfig) -> list[LayoutNode]:
    """Nudge touching nodes apart, then pull everything back slightly.

    Mutates and returns *nodes*. A node with a known depth never ends
    up closer to the root band than ``depth * vertical_spacing``.
    """
    _snapshot(nodes)
    min_distance = config.horizontal_spacing * RELAX_MIN_DISTANCE_RATIO

    iterations = 0
    for _ in range(RELAX_ITERATIONS):
        iterations += 1
        fired = 0
        for i, a in enumerate(nodes):
            for b in nodes[i + 1 :]:
                dx = b.center_x - a.center_x
                dy = b.center_y - a.center_y
                distance = math.hypot(dx, dy)
                if 0 < distance < min_distance:
                    fx = dx / distance * RELAX_FORCE
                    fy = dy / distance * RELAX_FORCE
                    a.x -= fx
                    a.y -= fy
                    b.x += fx
                    b.y += fy
                    fired += 1
        if fired == 0:
            break

    for node in nodes:
        node.x += (node.original_x - node.x) * RELAX_ATTRACTION
        node.y += (node.original_y - node.y) * RELAX_ATTRACTION
        if node.depth is not None:
            node.y = min(node.y, -node.depth * config.vertical_spacing)

    logger.debug("Relaxed %d nodes in %d iterations", len(nodes), iterations)
    return nodes


def _overlap(a_start: float, a_size: float, b_start: float, b_size: float) -> float:
    return max(0.0, min(a_start + a_size, b_start + b_size) - max(a_start, b_start))


def relax_cyclic(nodes: list[LayoutNode], config: LayoutConfig) -> list[LayoutNode]:
    """Separate nodes vertically until no pair overlaps or crowds a row.

    A pair fires when the boxes overlap, or when their vertical centers
    are closer than ``node_height * 0.8`` regardless of horizontal
    distance. Only Y moves. Mutates and returns *nodes*.
    """
    _snapshot(nodes)
    min_separation = config.node_height * CYCLIC_MIN_SEPARATION_RATIO

    iterations = 0
    touching = 1
    while touching and iterations < CYCLIC_MAX_ITERATIONS:
        iterations += 1
        touching = 0
        for i, a in enumerate(nodes):
            for b in nodes[i + 1 :]:
                overlap_x = _overlap(a.x, a.width, b.x, b.width)
                overlap_y = _overlap(a.y, a.height, b.y, b.height)
                vertical_distance = abs(b.center_y - a.center_y)
                if overlap_x > 0 and overlap_y > 0:
                    force = overlap_y * CYCLIC_FORCE
                elif vertical_distance < min_separation:
                    force = (min_separation - vertical_distance) * CYCLIC_FORCE
                else:
                    continue
                touching += 1
                if a.y < b.y:
                    a.y -= force
                    b.y += force
                else:
                    a.y += force
                    b.y -= force

    for node in nodes:
        node.y += (node.original_y - node.y) * CYCLIC_ATTRACTION

    logger.debug(
        "Cyclic relaxation of %d nodes stopped after %d iterations",
        len(nodes),
        iterations,
    )
    return nodes
