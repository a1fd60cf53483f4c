"""Dancer CLI application - main entry point."""

import typer
from rich.console import Console
from rich.traceback import install

from .serve import serve
from .workspaces import workspaces_app

install(show_locals=False, width=None, word_wrap=True)

app = typer.Typer(
    name="dancer",
    help="Serve cached editor profiles, starting points and DCTAP exports for workspaces",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show version information."""
    from dancer import __version__

    console.print(f"Dancer version {__version__}")


app.command("serve")(serve)
app.add_typer(workspaces_app, name="workspaces")


if __name__ == "__main__":
    app()
