"""Theme and style constants for perk tree previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a perk tree preview."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    node_corner_radius: float
    edge_color: str
    edge_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    # Highlight for nodes placed by the cyclic fallback
    fallback_stroke: str = "#e05d5d"
