"""SVG preview of a computed layout using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from perk_layout.parser.model import GraphRecord, LayoutConfig, LayoutNode
from perk_layout.render.style import Theme


def render_svg(
    nodes: list[LayoutNode],
    records: list[GraphRecord],
    theme: Theme,
    config: LayoutConfig | None = None,
    fallback_ids: set[str] | None = None,
) -> str:
    """Render positioned nodes and their prerequisite edges to an SVG string.

    The layout's bounding box is shifted so its top-left corner sits at
    ``(padding, padding)``. Edges are straight center-to-center lines
    looked up from each record's children.
    """
    if not nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    config = config or LayoutConfig()
    padding = config.padding
    fallback_ids = fallback_ids or set()

    min_x = min(n.x for n in nodes)
    min_y = min(n.y for n in nodes)
    max_x = max(n.x + n.width for n in nodes)
    max_y = max(n.y + n.height for n in nodes)

    dx = padding - min_x
    dy = padding - min_y
    svg_width = int(max_x - min_x + padding * 2)
    svg_height = int(max_y - min_y + padding * 2)

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    by_id = {n.id: n for n in nodes}
    labels = {r.id: r.label or r.id for r in records}

    _render_edges(d, by_id, records, theme, dx, dy)
    _render_nodes(d, nodes, labels, theme, dx, dy, fallback_ids)

    return d.as_svg()


def _render_edges(
    d: draw.Drawing,
    by_id: dict[str, LayoutNode],
    records: list[GraphRecord],
    theme: Theme,
    dx: float,
    dy: float,
) -> None:
    for record in records:
        parent = by_id.get(record.id)
        if parent is None:
            continue
        for child_id in record.children:
            child = by_id.get(child_id)
            if child is None or child is parent:
                continue
            d.append(draw.Line(
                parent.center_x + dx, parent.center_y + dy,
                child.center_x + dx, child.center_y + dy,
                stroke=theme.edge_color,
                stroke_width=theme.edge_width,
                stroke_linecap="round",
            ))


def _render_nodes(
    d: draw.Drawing,
    nodes: list[LayoutNode],
    labels: dict[str, str],
    theme: Theme,
    dx: float,
    dy: float,
    fallback_ids: set[str],
) -> None:
    for node in nodes:
        stroke = theme.fallback_stroke if node.id in fallback_ids else theme.node_stroke
        d.append(draw.Rectangle(
            node.x + dx, node.y + dy,
            node.width, node.height,
            rx=theme.node_corner_radius, ry=theme.node_corner_radius,
            fill=theme.node_fill,
            stroke=stroke,
            stroke_width=theme.node_stroke_width,
        ))
        d.append(draw.Text(
            labels.get(node.id, node.id),
            theme.label_font_size,
            node.center_x + dx, node.center_y + dy,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))
