"""CLI command for running the serve API."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

console = Console()


def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Host to bind to (default from config)"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to bind to (default from config)"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config.json"),
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", help="Directory holding workspace files (overrides DANCER_DATA_DIR and config)"
    ),
):
    """Start the serve API server."""
    import uvicorn

    from dancer.config import load_config
    from dancer.serve import create_app
    from dancer.workspace import WorkspaceStore

    config = load_config(config_path)
    if host:
        config.host = host
    if port:
        config.port = port

    store = WorkspaceStore(data_dir if data_dir else config.resolve_data_dir())

    console.print("[cyan]Starting Dancer Serve...[/cyan]")
    console.print(f"[dim]Server: http://{config.host}:{config.port}{config.base_path}/workspaces[/dim]")
    console.print(f"[dim]Workspaces: {store.root}[/dim]\n")

    try:
        uvicorn.run(
            create_app(config, store=store),
            host=config.host,
            port=config.port,
            log_level=config.log_level,
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Server error: {e}[/red]")
        raise typer.Exit(1)
