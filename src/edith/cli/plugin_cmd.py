"""CLI commands for plugin inspection."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from edith.errors import EditorError

console = Console()


def list_plugins(path: str | None = None) -> None:
    """List the plugins declared by the config that applies to ``path``."""
    from edith.cli.edit_cmd import resolve_editing_path
    from edith.config.loader import ConfigLoader
    from edith.discovery.manifests import ManifestFilesLocator
    from edith.editor.resolver import directory_key
    from edith.plugins.service import PluginService

    editing_path = resolve_editing_path(path)
    locator = ManifestFilesLocator()

    try:
        config = ConfigLoader(locator).load_config(editing_path)
        plugins = PluginService().load_plugins(config).helper_plugins
    except EditorError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e

    if not plugins:
        console.print("[dim]No plugins found.[/dim]")
        console.print("Declare plugins in Edith/Config.yaml.")
        return

    editable = {
        directory_key(manifest.parent)
        for manifest in locator.locate_plugin_manifests(editing_path)
    }

    table = Table(title="Plugins")
    table.add_column("Name", style="cyan")
    table.add_column("Directory")
    table.add_column("Mode")

    for plugin in plugins:
        mode = (
            "[green]editable[/green]"
            if directory_key(plugin.source_directory) in editable
            else "built"
        )
        table.add_row(plugin.name, str(plugin.source_directory), mode)

    console.print(table)
