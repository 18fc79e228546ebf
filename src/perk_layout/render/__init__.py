"""SVG preview rendering."""

from perk_layout.render.svg import render_svg

__all__ = ["render_svg"]
