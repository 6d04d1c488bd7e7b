"""Main CLI application using Typer."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from edith import __version__

# Create Typer app
app = typer.Typer(
    name="edith",
    help="edith - Editable workspaces for manifest-driven projects",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def version():
    """Show edith version."""
    console.print(f"edith version {__version__}")


@app.command()
def edit(
    path: str = typer.Argument(None, help="Directory to edit (default: current directory)"),
    destination: str = typer.Option(
        None,
        "--destination",
        "-d",
        help="Directory to generate the workspace in (default: a temporary directory)",
    ),
    permanent: bool = typer.Option(
        False, "--permanent", "-P", help="Generate the workspace next to the manifests"
    ),
):
    """Generate a workspace to edit the manifests of a directory."""
    from edith.cli.edit_cmd import edit_command

    edit_command(path=path, destination=destination, permanent=permanent)


# Plugin commands
plugin_app = typer.Typer(help="Inspect edith plugins")
app.add_typer(plugin_app, name="plugin")


@plugin_app.command("list")
def plugin_list(
    path: str = typer.Argument(None, help="Directory whose config declares the plugins"),
):
    """List the plugins loaded for a directory."""
    from edith.cli.plugin_cmd import list_plugins

    list_plugins(path=path)


if __name__ == "__main__":
    app()
