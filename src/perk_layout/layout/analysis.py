"""Graph analysis: connected components, roots, and depth bands.

Depths come from a breadth-first walk from every root (first visit
wins, so each node gets its shortest distance), followed by a bounded
multi-parent reconciliation and a topological monotonicity repair.
"""

from __future__ import annotations

__all__ = ["analyze", "known_parents", "known_children"]

import logging
from collections import deque

import networkx as nx

from perk_layout.layout.constants import RECONCILE_MAX_PASSES
from perk_layout.parser.model import Analysis, GraphRecord, Tree

logger = logging.getLogger(__name__)


def known_parents(record: GraphRecord, ids: set[str] | dict[str, GraphRecord]) -> list[str]:
    """Parents of *record* that resolve to a known id, in declared order."""
    return [p for p in record.parents if p in ids]


def known_children(record: GraphRecord, ids: set[str] | dict[str, GraphRecord]) -> list[str]:
    """Children of *record* that resolve to a known id, in declared order."""
    return [c for c in record.children if c in ids]


def analyze(records: list[GraphRecord]) -> Analysis:
    """Partition records into trees and assign a depth to every node.

    Dangling parent/child references are ignored. A tree is flagged
    ``cyclic`` when some node is unreachable from its roots, when
    reconciliation fails to settle, or when it has no topological order.
    """
    by_id = {r.id: r for r in records}

    U = nx.Graph()
    U.add_nodes_from(sorted(by_id))
    for rid in sorted(by_id):
        record = by_id[rid]
        for other in known_children(record, by_id) + known_parents(record, by_id):
            U.add_edge(rid, other)

    components = sorted(
        (sorted(c) for c in nx.connected_components(U)), key=lambda c: c[0]
    )

    analysis = Analysis()
    for index, node_ids in enumerate(components):
        tree, depths = _analyze_tree(index, node_ids, by_id)
        analysis.trees.append(tree)
        analysis.depth_of.update(depths)
        analysis.roots.update(tree.roots)

    logger.debug(
        "Analyzed %d records into %d trees (%d cyclic)",
        len(by_id),
        len(analysis.trees),
        sum(1 for t in analysis.trees if t.cyclic),
    )
    return analysis


def _analyze_tree(
    index: int,
    node_ids: list[str],
    by_id: dict[str, GraphRecord],
) -> tuple[Tree, dict[str, int]]:
    members = set(node_ids)
    parents_of = {nid: known_parents(by_id[nid], members) for nid in node_ids}
    children_of = {nid: known_children(by_id[nid], members) for nid in node_ids}

    roots = [nid for nid in node_ids if not parents_of[nid]]
    cyclic = False

    # Step 1: BFS from all roots, first visit wins
    depths: dict[str, int] = {}
    queue: deque[tuple[str, int]] = deque((r, 0) for r in roots)
    while queue:
        nid, depth = queue.popleft()
        if nid in depths:
            continue
        depths[nid] = depth
        for child in children_of[nid]:
            if child not in depths:
                queue.append((child, depth + 1))

    unreached = [nid for nid in node_ids if nid not in depths]
    if unreached:
        cyclic = True
        for nid in unreached:
            depths[nid] = 0

    # Step 2: Multi-parent reconciliation
    changed = True
    passes = 0
    while changed and passes < RECONCILE_MAX_PASSES:
        changed = False
        passes += 1
        for nid in node_ids:
            parents = parents_of[nid]
            if len(parents) < 2:
                continue
            expected = min(depths[p] for p in parents) + 1
            if depths[nid] != expected:
                depths[nid] = expected
                changed = True
    if changed:
        cyclic = True

    # Step 3: Push children below their parents, in topological order
    if not cyclic:
        D = nx.DiGraph()
        D.add_nodes_from(node_ids)
        for nid in node_ids:
            for child in children_of[nid]:
                D.add_edge(nid, child)
        try:
            order = list(nx.lexicographical_topological_sort(D))
        except nx.NetworkXUnfeasible:
            cyclic = True
        else:
            for nid in order:
                for child in children_of[nid]:
                    if depths[child] <= depths[nid]:
                        depths[child] = depths[nid] + 1

    if cyclic:
        logger.debug("Tree %d (%s...) flagged cyclic during analysis", index, node_ids[0])

    tree = Tree(index=index, node_ids=tuple(node_ids), roots=tuple(roots), cyclic=cyclic)
    return tree, depths
