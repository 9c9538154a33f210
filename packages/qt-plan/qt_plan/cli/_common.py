"""Shared CLI helpers: query input and Rich output."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click
from rich.console import Console

from ..plan.nodes import PlanNode
from ..render import build_rich_tree, forest_to_json

console = Console()


def read_query(query_or_file: str) -> str:
    """Return SQL text from an argument that is either a .sql path or SQL itself."""
    path = Path(query_or_file)
    if path.suffix.lower() in (".sql", ".txt"):
        if not path.exists():
            raise click.ClickException(f"File not found: {query_or_file}")
        return path.read_text(encoding="utf-8").strip()
    return query_or_file


def print_forest(forest: Sequence[PlanNode], title: str, as_json: bool) -> None:
    """Print a plan forest as JSON or as a tree."""
    if as_json:
        click.echo(forest_to_json(forest))
        return
    if not forest:
        console.print("[yellow]Empty plan.[/yellow]")
        return
    console.print(build_rich_tree(forest, title=title))


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {text}")


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]{text}[/bold green]")
