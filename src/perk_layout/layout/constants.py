"""Layout constants used across layout modules.

Centralizes the default geometry and the tuning knobs of the
analysis, relaxation, and fallback passes.
"""

# ---------------------------------------------------------------------------
# Node geometry defaults (used as LayoutConfig defaults)
# ---------------------------------------------------------------------------
NODE_WIDTH: float = 140.0
"""Default width of a perk node."""

NODE_HEIGHT: float = 80.0
"""Default height of a perk node."""

HORIZONTAL_SPACING: float = 40.0
"""Horizontal gap between sibling subtrees and between packed trees."""

VERTICAL_SPACING: float = 200.0
"""Distance between consecutive depth bands."""

PADDING: float = 50.0
"""Canvas margin around the laid-out graph."""

GRID_SCALE_X: float = 180.0
"""Pixels per seed grid column (fallback layout)."""

GRID_SCALE_Y: float = 120.0
"""Pixels per seed grid row (fallback layout)."""

# ---------------------------------------------------------------------------
# Label measurement
# ---------------------------------------------------------------------------
CHAR_WIDTH: float = 8.0
"""Approximate pixel width of a single label character."""

TEXT_PADDING: float = 24.0
"""Horizontal padding added around a measured label."""

# ---------------------------------------------------------------------------
# Graph analysis
# ---------------------------------------------------------------------------
RECONCILE_MAX_PASSES: int = 10
"""Pass budget for multi-parent depth reconciliation."""

# ---------------------------------------------------------------------------
# Force relaxation
# ---------------------------------------------------------------------------
RELAX_ITERATIONS: int = 5
"""Maximum repulsion passes for the mild relaxation."""

RELAX_FORCE: float = 0.03
"""Repulsion step applied to each touching pair."""

RELAX_ATTRACTION: float = 0.02
"""Fraction of the way each node is pulled back to its original position."""

RELAX_MIN_DISTANCE_RATIO: float = 0.4
"""Repulsion threshold as a fraction of horizontal spacing."""

ROOT_BAND_TOLERANCE: float = 1.0
"""Y tolerance for deciding which nodes form a tree's root band."""

# ---------------------------------------------------------------------------
# Cyclic fallback
# ---------------------------------------------------------------------------
CYCLIC_FORCE: float = 0.08
"""Repulsion factor applied to vertical overlap in cyclic trees."""

CYCLIC_ATTRACTION: float = 0.03
"""Vertical pull back toward the seeded position in cyclic trees."""

CYCLIC_MAX_ITERATIONS: int = 50
"""Iteration cap for cyclic relaxation."""

CYCLIC_MIN_SEPARATION_RATIO: float = 0.8
"""Minimum vertical center separation as a fraction of node height."""
