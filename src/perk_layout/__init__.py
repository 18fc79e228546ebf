"""perk-layout: automatic 2D layout of perk progression graphs."""

__version__ = "0.1.0"

from perk_layout.layout import compute_layout  # noqa: E402

__all__ = ["__version__", "compute_layout"]
