# src/player_versions/cli.py
"""
player_versions Command Line Interface (CLI).

This module implements the terminal front end using `typer` and `rich`.
It reads an already-fetched version-history JSON file (the upstream feed
shape, ``{"player_id": ..., "versions": [...]}``) and never touches the
network.

Features
--------
- **Version list**: one line per retained version with its change summary.
- **Detail view**: tracked fields of one version, with the fields that
  changed since the previous retained version highlighted.
- **Element diffs**: modifications and equipment rows labelled as added,
  removed or kept, using the sequence aligner.

Usage
-----
    $ player-versions annotate history.json
    $ player-versions annotate history.json --json
    $ player-versions show history.json --index 3
"""

from __future__ import annotations

import json
import traceback
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from player_versions.core.contracts.annotated import AnnotatedSnapshot
from player_versions.core.contracts.history import PlayerHistory, load_history
from player_versions.core.contracts.snapshot import (
    Equipment,
    Modification,
    display_season_day,
    slot_abbreviation,
)
from player_versions.core.diff.fields import (
    TRACKED_FIELDS,
    ElementChange,
    mapping_changes,
    modification_changes,
)
from player_versions.pipelines.annotate import annotate as annotate_history

# Ensure env vars (like LOG_LEVEL) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="player_versions: explain how a player changed between versions.",
    rich_markup_mode="markdown",
)
console = Console()

_STATUS_STYLE = {
    "added": "green",
    "removed": "red",
    "changed": "yellow",
    "kept": "dim",
}
_STATUS_MARK = {"added": "+", "removed": "-", "changed": "~", "kept": " "}


# --------------------------------------------------------------------------- #
# Helpers: Loading & Rendering
# --------------------------------------------------------------------------- #


def _load(file: Path, verbose: bool) -> PlayerHistory:
    """Helper: Load the history file or exit with code 1 and a readable error."""
    try:
        return load_history(file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        console.print(f"[bold red]❌ Could not load {file.name}:[/bold red] {e}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e


def _modification_text(modification: Modification | None) -> str:
    if modification is None:
        return "Unidentified modification"
    return f"{modification.emoji} {modification.name}".strip()


def _equipment_text(equipment: Equipment | None) -> str:
    return equipment.display_name if equipment else "Empty"


def _field_text(version: AnnotatedSnapshot, field: str) -> str:
    """Helper: Render one tracked field of the selected version as text."""
    snap = version.snapshot
    if field == "slot":
        return slot_abbreviation(snap.slot) or "-"
    if field in ("greater_boon", "lesser_boon"):
        boon = getattr(snap, field)
        return _modification_text(boon) if boon else "None"
    if field == "modifications":
        return f"{len(snap.modifications)} modification(s)"
    if field in ("equipment", "reports"):
        present = sorted(k for k, v in getattr(snap, field).items() if v is not None)
        return ", ".join(present) or "None"
    value = getattr(snap, field)
    return "-" if value is None else str(value)


def _render_rows(title: str, rows: list[ElementChange], render: Any) -> None:
    """Helper: Print aligned element rows with +/-/~ markers."""
    if not rows:
        return
    console.print(f"[bold]{title}[/bold]")
    for row in rows:
        style = _STATUS_STYLE[row.status]
        item = row.current if row.status != "removed" else row.previous
        prefix = f"{row.key}: " if row.key is not None else ""
        text = escape(prefix + render(item))
        console.print(f" [{style}]{_STATUS_MARK[row.status]} {text}[/{style}]")


def _render_detail(version: AnnotatedSnapshot) -> None:
    """Helper: Render the detail view of one annotated version."""
    snap = version.snapshot
    season_day, is_error = display_season_day(
        snap.birthseason, snap.birthday_type, snap.birthday_day, snap.birthday_superstar_day
    )
    born_style = "red" if is_error else "white"
    console.print(
        Panel.fit(
            f"[bold]{slot_abbreviation(snap.slot)} {escape(snap.full_name)} #{snap.number}[/bold]\n"
            f"[{born_style}]Born {season_day}[/{born_style}]\n"
            f"Valid from {snap.valid_from.isoformat()}"
            + (f" until {snap.valid_until.isoformat()}" if snap.valid_until else " (current)"),
            border_style="cyan",
        )
    )
    console.print(f"Changes: [bold]{escape(version.label)}[/bold]\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")
    for field in TRACKED_FIELDS:
        style = "bold yellow" if version.changed(field) else ""
        table.add_row(field, escape(_field_text(version, field)), style=style)
    console.print(table)

    prev = version.previous
    _render_rows(
        "Modifications",
        modification_changes(prev, snap) if prev else modification_changes(snap, snap),
        _modification_text,
    )
    _render_rows(
        "Equipment",
        mapping_changes(prev.equipment if prev else snap.equipment, snap.equipment),
        _equipment_text,
    )


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


# Fixed (MyPy): Untyped decorator workaround
@app.command()  # type: ignore[misc]
def annotate(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a version-history JSON file.",
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the annotated history as JSON."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    List every distinct version of a player with its change summary.

    Versions with no visible difference from the previous one are skipped.
    """
    history = _load(file, verbose)
    versions = annotate_history(history)

    if as_json:
        payload = [
            {
                "id": v.snapshot.id,
                "valid_from": v.snapshot.valid_from.isoformat(),
                "differences": list(v.differences) if v.differences is not None else None,
                "changes": list(v.changes),
            }
            for v in versions
        ]
        typer.echo(json.dumps({"player_id": history.player_id, "versions": payload}, indent=2))
        return

    console.rule(f"[bold]Player {history.player_id}[/bold]")
    if not versions:
        console.print("No versions for this player")
        return
    for idx, version in enumerate(versions):
        stamp = version.snapshot.valid_from.strftime("%Y-%m-%d %H:%M")
        console.print(f" [dim]{idx:03d}[/dim] [cyan]{stamp}[/cyan] {escape(version.label)}")


# Fixed (MyPy): Untyped decorator workaround
@app.command()  # type: ignore[misc]
def show(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a version-history JSON file.",
        ),
    ],
    index: Annotated[
        int,
        typer.Option("--index", "-i", help="Index in the annotated list (negative counts back)."),
    ] = -1,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Show one annotated version, highlighting what changed since the last one.
    """
    history = _load(file, verbose)
    versions = annotate_history(history)
    if not versions:
        console.print("No versions for this player")
        raise typer.Exit(code=1)
    try:
        version = versions[index]
    except IndexError as e:
        console.print(
            f"[bold red]❌ Index {index} out of range[/bold red] ({len(versions)} versions)"
        )
        raise typer.Exit(code=1) from e
    _render_detail(version)


if __name__ == "__main__":
    app()
