"""Typer CLI application."""

from pathlib import Path
from typing import Optional

import typer

from erdkit.config import get_settings, setup_logging
from erdkit.ir.errors import DiagramError
from erdkit.utils.ir_io import (
    export_markdown,
    export_mermaid,
    load_diagram_from_json,
    save_diagram_to_json,
)

app = typer.Typer(help="erdkit: ER diagram normalization and export")


def _fail(error: Exception):
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _load(in_json: Path):
    try:
        return load_diagram_from_json(in_json)
    except (DiagramError, FileNotFoundError) as e:
        _fail(e)


@app.command()
def normalize(in_json: Path, out_json: Optional[Path] = typer.Argument(None)):
    """
    Load a diagram, repair missing fields and write it back.

    Args:
        in_json: Diagram JSON file
        out_json: Output path (defaults to overwriting in_json)
    """
    setup_logging()
    diagram = _load(in_json)
    try:
        target = save_diagram_to_json(diagram, out_json or in_json)
    except DiagramError as e:
        _fail(e)
    typer.echo(f"✓ Normalized diagram written to {target}")


@app.command()
def markdown(in_json: Path, out_md: Optional[Path] = typer.Argument(None)):
    """Export a diagram as a Markdown data dictionary."""
    setup_logging()
    diagram = _load(in_json)
    target = out_md or get_settings().export_dir / f"{in_json.stem}.md"
    try:
        export_markdown(diagram, target)
    except DiagramError as e:
        _fail(e)
    typer.echo(f"✓ Markdown written to {target}")


@app.command()
def mermaid(in_json: Path, out_md: Optional[Path] = typer.Argument(None)):
    """Export a diagram as a Mermaid ER diagram."""
    setup_logging()
    diagram = _load(in_json)
    target = out_md or get_settings().export_dir / f"{in_json.stem}_mermaid.md"
    try:
        export_mermaid(diagram, target)
    except DiagramError as e:
        _fail(e)
    typer.echo(f"✓ Mermaid written to {target}")


@app.command()
def info(in_json: Path):
    """Print entity and relation counts for a diagram."""
    setup_logging()
    diagram = _load(in_json)
    dangling = sum(1 for r in diagram.relations if diagram.resolve_relation(r) is None)
    typer.echo(f"Entities:  {len(diagram.entities)}")
    typer.echo(f"Relations: {len(diagram.relations)}")
    typer.echo(f"Dangling:  {dangling}")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
