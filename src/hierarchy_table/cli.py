"""CLI for hierarchy-table: inspect record files as an expandable table."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from hierarchy_table.config import resolve_data_file
from hierarchy_table.core.importer.json_reader import load_records
from hierarchy_table.core.tree.builder import build, iter_nodes
from hierarchy_table.errors import NormalizationError
from hierarchy_table.logging_config import configure_logging
from hierarchy_table.models.node import RawRecord, Row
from hierarchy_table.store import get_store

app = typer.Typer(help="Hierarchy table: browse nested record files as an expandable table.")

_PathArgument = Annotated[
    Path | None,
    typer.Argument(help="JSON file with nested or flat records"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _read(path: Path | None, *, strict: bool) -> tuple[RawRecord, ...]:
    """Load records, turning I/O and parse failures into a CLI exit."""
    src = path or resolve_data_file()
    try:
        return load_records(src, strict=strict)
    except FileNotFoundError:
        logger.error("Data file not found: {}", src)
        raise typer.Exit(1) from None
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON in {}: {}", src, exc)
        raise typer.Exit(1) from None
    except NormalizationError as exc:
        logger.error("{}: {}", src, exc)
        raise typer.Exit(1) from None


def _format_row(row: Row, columns: list[str]) -> str:
    node = row.node
    marker = " "
    if row.can_expand:
        marker = "▾" if row.expanded else "▸"
    label = f"[{node.relationship_name}] " if node.relationship_name else ""
    cells = "  ".join(f"{col}={node.data.get(col, '')}" for col in columns)
    return f"{'    ' * node.depth}{marker} {label}{cells}"


@app.command()
def show(
    path: _PathArgument = None,
    expand_all: bool = typer.Option(False, "--expand-all", "-a", help="Expand every node"),
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Expand nodes shallower than this depth"),
    ] = None,
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized input shapes"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print the visible rows of a record file."""
    store = get_store()
    store.initialize(build(_read(path, strict=strict)))

    for node in iter_nodes(store.tree):
        if not node.children:
            continue
        if expand_all or (max_depth is not None and node.depth < max_depth):
            store.toggle_expanded(node.uid)

    rows = store.rows()
    if output_json:
        data = [
            {
                "uid": r.node.uid,
                "depth": r.node.depth,
                "relationship": r.node.relationship_name,
                "expanded": r.expanded,
                "data": dict(r.node.data),
            }
            for r in rows
        ]
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if not rows:
        typer.echo("No records.")
        return

    by_depth = store.columns_by_depth
    for r in rows:
        typer.echo(_format_row(r, by_depth.get(r.node.depth, [])))


@app.command()
def columns(
    path: _PathArgument = None,
    by_depth: bool = typer.Option(False, "--by-depth", "-d", help="Group columns by depth"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized input shapes"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print the column inventory of a record file."""
    store = get_store()
    store.initialize(build(_read(path, strict=strict)))

    if by_depth:
        inventory = store.columns_by_depth
        if output_json:
            typer.echo(json.dumps({str(d): cols for d, cols in inventory.items()}, indent=2))
            return
        for depth, cols in sorted(inventory.items()):
            typer.echo(f"{depth}: {', '.join(cols)}")
        return

    if output_json:
        typer.echo(json.dumps(store.columns, indent=2))
        return
    typer.echo("\n".join(store.columns))
