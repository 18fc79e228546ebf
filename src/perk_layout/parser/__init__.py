"""Data model and record loading for perk graphs."""

from perk_layout.parser.model import GraphRecord, GridPosition, LayoutConfig, LayoutNode
from perk_layout.parser.records import load_records, parse_records

__all__ = [
    "GraphRecord",
    "GridPosition",
    "LayoutConfig",
    "LayoutNode",
    "load_records",
    "parse_records",
]
