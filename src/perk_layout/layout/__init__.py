"""Layout engine for perk progression graphs."""

from perk_layout.layout.engine import compute_layout, layout

__all__ = ["compute_layout", "layout"]
