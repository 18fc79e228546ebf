"""Subtree width computation with cycle detection.

Each recursion step extends an immutable visited set, so a node seen
twice along one call chain is a cycle, while siblings sharing a
descendant (diamonds) are not.
"""

from __future__ import annotations

__all__ = ["CycleDetected", "LayoutError", "SubtreeWidths", "measure_node_width"]

from perk_layout.layout.constants import CHAR_WIDTH, TEXT_PADDING
from perk_layout.parser.model import GraphRecord, LayoutConfig, Tree


class LayoutError(RuntimeError):
    """Base class for errors raised inside the layout engine."""


class CycleDetected(LayoutError):
    """Raised when subtree recursion revisits a node on its own path."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Circular reference detected for node {node_id!r}")
        self.node_id = node_id


def measure_node_width(record: GraphRecord, config: LayoutConfig) -> float:
    """Estimate a node's rendered width.

    Without ``measure_labels`` every node is ``config.node_width`` wide.
    Otherwise the label length is estimated from a fixed character
    width, floored at ``config.node_width``.
    """
    if not config.measure_labels:
        return config.node_width
    return max(len(record.label) * CHAR_WIDTH + TEXT_PADDING, config.node_width)


class SubtreeWidths:
    """Memoizing subtree width calculator for one layout run."""

    def __init__(self, records: dict[str, GraphRecord], config: LayoutConfig) -> None:
        self.records = records
        self.config = config
        self._cache: dict[str, float] = {}

    def width(self, node_id: str, visited: frozenset[str] = frozenset()) -> float:
        """Horizontal space needed by *node_id* and all of its descendants.

        Raises:
            CycleDetected: *node_id* already appears in *visited*.
        """
        if node_id in visited:
            raise CycleDetected(node_id)
        if node_id in self._cache:
            return self._cache[node_id]

        record = self.records.get(node_id)
        if record is None:
            return self.config.node_width

        own_width = measure_node_width(record, self.config)
        path = visited | {node_id}
        child_widths = [
            self.width(child, path) for child in record.children if child in self.records
        ]
        if not child_widths:
            result = own_width
        else:
            total = sum(child_widths)
            total += (len(child_widths) - 1) * self.config.horizontal_spacing
            result = max(total, own_width)

        self._cache[node_id] = result
        return result

    def widths_for_tree(self, tree: Tree) -> dict[str, float]:
        """Compute widths for every node of *tree*, failing fast on a cycle."""
        return {nid: self.width(nid) for nid in tree.node_ids}
