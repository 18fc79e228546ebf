"""Loader for perk tree JSON into GraphRecords.

Accepts the data source's perk tree shape (``{"perks": [...]}`` with
``edid``/``name``/``position``/``connection(s)`` keys), a bare list of
such perks, or the same list spelled with ``id``/``label``/
``seed_position``/``parents``/``children``.
"""

from __future__ import annotations

__all__ = ["load_records", "parse_records"]

import json
import math
from pathlib import Path
from typing import Any

from perk_layout.parser.model import GraphRecord, GridPosition


def load_records(path: str | Path) -> list[GraphRecord]:
    """Read a JSON file and parse it into GraphRecords."""
    text = Path(path).read_text()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e
    return parse_records(data)


def parse_records(data: Any) -> list[GraphRecord]:
    """Convert decoded JSON into GraphRecords, in input order.

    Duplicate ids are kept as-is; the layout engine assumes uniqueness.
    """
    if isinstance(data, dict):
        if "perks" not in data:
            raise ValueError("Perk tree object has no 'perks' list")
        perks = data["perks"]
    else:
        perks = data

    if not isinstance(perks, list):
        raise ValueError(f"Expected a list of perks, got {type(perks).__name__}")

    return [_parse_perk(perk, i) for i, perk in enumerate(perks)]


def _parse_perk(perk: Any, index: int) -> GraphRecord:
    if not isinstance(perk, dict):
        raise ValueError(f"Perk #{index} is not an object")

    node_id = perk.get("edid", perk.get("id"))
    if not isinstance(node_id, str) or not node_id:
        raise ValueError(f"Perk #{index} has no 'edid' or 'id'")

    label = perk.get("name", perk.get("label", node_id))
    if not isinstance(label, str):
        label = str(label)

    connection = perk.get("connection", perk.get("connections", perk))
    if not isinstance(connection, dict):
        raise ValueError(f"Perk {node_id!r}: connection must be an object")
    parents = _id_list(connection.get("parents", []), node_id, "parents")
    children = _id_list(connection.get("children", []), node_id, "children")

    position = perk.get("position", perk.get("seed_position", {})) or {}
    if not isinstance(position, dict):
        raise ValueError(f"Perk {node_id!r}: position must be an object")
    seed = GridPosition(
        x=_coordinate(position.get("x", 0), node_id, "x"),
        y=_coordinate(position.get("y", 0), node_id, "y"),
    )

    return GraphRecord(
        id=node_id,
        label=label,
        parents=parents,
        children=children,
        seed_position=seed,
    )


def _id_list(value: Any, node_id: str, key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Perk {node_id!r}: {key} must be a list of ids")
    return tuple(value)


def _coordinate(value: Any, node_id: str, axis: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Perk {node_id!r}: position.{axis} must be a number")
    if not math.isfinite(value):
        raise ValueError(f"Perk {node_id!r}: position.{axis} must be finite")
    return float(value)
