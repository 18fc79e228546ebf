"""Dark grey theme (matches the perk tree canvas)."""

from perk_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fill="#3a3a3a",
    node_stroke="#bfa15a",
    node_stroke_width=1.5,
    node_corner_radius=8.0,
    edge_color="#8c8c8c",
    edge_width=2.0,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
)
