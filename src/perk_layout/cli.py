"""CLI for perk-layout."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import click

from perk_layout import __version__
from perk_layout.layout import compute_layout
from perk_layout.layout.analysis import analyze
from perk_layout.layout.constants import (
    GRID_SCALE_X,
    GRID_SCALE_Y,
    HORIZONTAL_SPACING,
    NODE_HEIGHT,
    NODE_WIDTH,
    PADDING,
    VERTICAL_SPACING,
)
from perk_layout.parser import LayoutConfig, load_records
from perk_layout.parser.model import GraphRecord
from perk_layout.render import render_svg
from perk_layout.themes import THEMES


def _config_options(func):
    """Attach the LayoutConfig options shared by layout and render."""
    options = [
        click.option("--node-width", type=float, default=NODE_WIDTH, show_default=True,
                     help="Node width"),
        click.option("--node-height", type=float, default=NODE_HEIGHT, show_default=True,
                     help="Node height"),
        click.option("--h-spacing", type=float, default=HORIZONTAL_SPACING,
                     show_default=True, help="Horizontal spacing between subtrees"),
        click.option("--v-spacing", type=float, default=VERTICAL_SPACING,
                     show_default=True, help="Vertical spacing between depth bands"),
        click.option("--padding", type=float, default=PADDING, show_default=True,
                     help="Canvas padding"),
        click.option("--grid-scale-x", type=float, default=GRID_SCALE_X,
                     show_default=True, help="Seed grid column size (fallback layout)"),
        click.option("--grid-scale-y", type=float, default=GRID_SCALE_Y,
                     show_default=True, help="Seed grid row size (fallback layout)"),
        click.option("--measure-labels", is_flag=True, default=False,
                     help="Size nodes from their label length"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(
    node_width: float,
    node_height: float,
    h_spacing: float,
    v_spacing: float,
    padding: float,
    grid_scale_x: float,
    grid_scale_y: float,
    measure_labels: bool,
) -> LayoutConfig:
    try:
        return LayoutConfig(
            node_width=node_width,
            node_height=node_height,
            horizontal_spacing=h_spacing,
            vertical_spacing=v_spacing,
            padding=padding,
            grid_scale_x=grid_scale_x,
            grid_scale_y=grid_scale_y,
            measure_labels=measure_labels,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _load(input_file: Path) -> list[GraphRecord]:
    try:
        return load_records(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """perk-layout: Compute 2D layouts for perk progression graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Defaults to <input>.layout.json")
@_config_options
def layout(input_file: Path, output: Path | None, **options) -> None:
    """Compute node positions and write them as JSON."""
    config = _build_config(**options)
    records = _load(input_file)
    result = compute_layout(records, config)

    payload = {
        "nodes": [
            {**asdict(node), "children": list(node.children)} for node in result.nodes
        ],
        "fallback_trees": [list(ids) for ids in result.fallback_trees],
        "degraded": result.degraded,
    }

    if output is None:
        output = input_file.with_name(input_file.stem + ".layout.json")

    output.write_text(json.dumps(payload, indent=2) + "\n")
    click.echo(f"Laid out {len(result.nodes)} nodes "
               f"({len(result.fallback_trees)} fallback trees) -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@_config_options
def render(input_file: Path, output: Path | None, theme: str, **options) -> None:
    """Render a layout preview to SVG."""
    config = _build_config(**options)
    records = _load(input_file)
    result = compute_layout(records, config)

    fallback_ids = {nid for ids in result.fallback_trees for nid in ids}
    svg = render_svg(result.nodes, records, THEMES[theme], config, fallback_ids)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(result.nodes)} nodes -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show the tree structure of a perk graph."""
    records = _load(input_file)
    analysis = analyze(sorted(records, key=lambda r: r.id))

    click.echo(f"Nodes: {len(records)}")
    click.echo(f"Trees: {len(analysis.trees)}")
    click.echo(f"Roots: {len(analysis.roots)}")
    for tree in analysis.trees:
        max_depth = max(analysis.depth_of[nid] for nid in tree.node_ids)
        status = "cyclic" if tree.cyclic else f"max depth {max_depth}"
        click.echo(f"  [{tree.index}] {len(tree.node_ids)} nodes, "
                   f"{len(tree.roots)} roots, {status}")
