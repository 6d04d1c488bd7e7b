"""Edit command - generate an editable workspace."""

from __future__ import annotations

import tempfile
from pathlib import Path

import typer
from rich.console import Console

from edith.editor.orchestrator import ProjectEditor
from edith.errors import EditorError

console = Console()


def resolve_editing_path(path: str | None) -> Path:
    return Path(path).expanduser().absolute() if path else Path.cwd()


def edit_command(
    path: str | None = None,
    destination: str | None = None,
    permanent: bool = False,
    editor: ProjectEditor | None = None,
) -> Path:
    """Generate the workspace and print where it was written."""
    editing_path = resolve_editing_path(path)

    if permanent:
        target = editing_path
    elif destination:
        target = Path(destination).expanduser().absolute()
    else:
        target = Path(tempfile.mkdtemp(prefix="edith-"))

    editor = editor or ProjectEditor()
    try:
        report = editor.run(editing_path, target)
    except EditorError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e

    if report.warnings:
        console.print(f"[yellow]Generated with {len(report.warnings)} warning(s).[/yellow]")
    console.print(f"[green]Workspace generated at[/green] {report.workspace_path}")
    return report.workspace_path
