"""Workspace inspection CLI commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

console = Console()

workspaces_app = typer.Typer(help="Inspect and create workspaces")

DataDirOption = typer.Option(None, "--data-dir", help="Directory holding workspace files")


def _get_store(data_dir: Optional[Path]):
    from dancer.config import load_config
    from dancer.workspace import WorkspaceStore

    if data_dir is None:
        data_dir = load_config().resolve_data_dir()
    return WorkspaceStore(data_dir)


@workspaces_app.command("list")
def workspaces_list(data_dir: Optional[Path] = DataDirOption):
    """List workspaces with their slugs."""
    from rich.table import Table

    from dancer.slugs import build_slug_map, slugify

    workspaces = _get_store(data_dir).list()

    if not workspaces:
        console.print("[yellow]No workspaces found[/yellow]")
        return

    slug_map = build_slug_map(workspaces)

    table = Table(title=f"Workspaces ({len(workspaces)} total)")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Slug")
    table.add_column("Updated", style="dim")

    for ws in workspaces:
        slug = slugify(ws.name)
        if not slug:
            slug_cell = "[dim]-[/dim]"
        elif slug_map.resolve(slug) != ws.id:
            slug_cell = f"[yellow]{slug} (taken)[/yellow]"
        else:
            slug_cell = slug
        table.add_row(ws.id, ws.name, slug_cell, ws.updated_at.isoformat()[:19])

    console.print(table)

    for slug in sorted(slug_map.duplicate_slugs):
        console.print(f'[yellow]Warning: multiple workspaces share the slug "{slug}"[/yellow]')


@workspaces_app.command("create")
def workspaces_create(
    name: str = typer.Argument(help="Workspace name"),
    data_dir: Optional[Path] = DataDirOption,
):
    """Create an empty workspace."""
    from dancer.slugs import slugify

    try:
        workspace = _get_store(data_dir).create(name)
    except OSError as e:
        console.print(f"[red]Failed to create workspace: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Created workspace '{workspace.name}'[/green]")
    console.print(f"  id:   {workspace.id}")
    slug = slugify(workspace.name)
    if slug:
        console.print(f"  slug: {slug}")


@workspaces_app.command("slug")
def workspaces_slug(name: str = typer.Argument(help="Workspace name")):
    """Show the slug a workspace name maps to."""
    from dancer.slugs import slugify

    slug = slugify(name)
    if not slug:
        console.print(f"[yellow]'{name}' has no slug; address it by id[/yellow]")
        raise typer.Exit(1)
    console.print(slug)
