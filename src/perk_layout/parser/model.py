"""Data model for perk graph layout."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from perk_layout.layout.constants import (
    GRID_SCALE_X,
    GRID_SCALE_Y,
    HORIZONTAL_SPACING,
    NODE_HEIGHT,
    NODE_WIDTH,
    PADDING,
    VERTICAL_SPACING,
)


@dataclass(frozen=True)
class GridPosition:
    """Coarse grid position supplied by the data source."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class GraphRecord:
    """A perk node with its prerequisite links.

    ``children`` is the denormalized inverse of ``parents``; the engine
    trusts the caller to keep them consistent.
    """

    id: str
    label: str = ""
    parents: tuple[str, ...] = ()
    children: tuple[str, ...] = ()
    seed_position: GridPosition = field(default_factory=GridPosition)


@dataclass(frozen=True)
class LayoutConfig:
    """Distances (in rendering units) that drive a layout run."""

    node_width: float = NODE_WIDTH
    node_height: float = NODE_HEIGHT
    horizontal_spacing: float = HORIZONTAL_SPACING
    vertical_spacing: float = VERTICAL_SPACING
    padding: float = PADDING
    grid_scale_x: float = GRID_SCALE_X
    grid_scale_y: float = GRID_SCALE_Y
    # Size nodes from their labels instead of using node_width everywhere
    measure_labels: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "measure_labels":
                continue
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(
                    f"LayoutConfig.{f.name} must be a positive number, got {value!r}"
                )


@dataclass
class LayoutNode:
    """A positioned node (populated by the layout engine)."""

    id: str
    x: float = 0.0
    y: float = 0.0
    width: float = NODE_WIDTH
    height: float = NODE_HEIGHT
    # Position immediately before the last relaxation pass
    original_x: float = 0.0
    original_y: float = 0.0
    children: tuple[str, ...] = ()
    # Depth band, or None when placed by the cyclic fallback
    depth: int | None = None

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass(frozen=True)
class Tree:
    """A connected component of the prerequisite graph."""

    index: int
    node_ids: tuple[str, ...]
    roots: tuple[str, ...]
    cyclic: bool = False


@dataclass
class Analysis:
    """Result of graph analysis: components, depths, and roots."""

    trees: list[Tree] = field(default_factory=list)
    depth_of: dict[str, int] = field(default_factory=dict)
    roots: set[str] = field(default_factory=set)


@dataclass
class LayoutResult:
    """Layout output plus diagnostics about degraded trees.

    ``fallback_trees`` holds, per tree routed through the cyclic
    fallback, the ids of its nodes. ``degraded`` is set when any part
    of the result came from the last-resort zeroed layout.
    """

    nodes: list[LayoutNode] = field(default_factory=list)
    fallback_trees: list[tuple[str, ...]] = field(default_factory=list)
    degraded: bool = False

    @property
    def used_fallback(self) -> bool:
        return bool(self.fallback_trees)
