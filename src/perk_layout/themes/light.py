"""Light theme for printing and documentation."""

from perk_layout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    node_fill="#f4f4f4",
    node_stroke="#555555",
    node_stroke_width=1.5,
    node_corner_radius=8.0,
    edge_color="#9a9a9a",
    edge_width=2.0,
    label_color="#222222",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    fallback_stroke="#c0392b",
)
