"""Userhub CLI application using Typer.

This module provides command-line utilities for the Userhub backend,
including starting the HTTP server.
"""

from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from userhub_config.settings import get_settings

APP_FACTORY = "userhub.presentation.api.app:create_app"

app = typer.Typer(
    name="userhub",
    help="Userhub - in-memory user service CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Interface to bind (default: API_HOST setting)",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        min=0,
        max=65535,
        help="Port to listen on (default: API_PORT setting)",
    ),
    reload: bool = typer.Option(
        False,
        "--reload",
        help="Restart the server when source files change",
    ),
) -> None:
    """Run the Userhub HTTP API.

    All users live in memory; stopping the server discards them.
    """
    settings = get_settings()
    bind_host = host or settings.api_host
    bind_port = settings.api_port if port is None else port

    console.print(
        f"\n[bold green]{settings.app_name} API[/bold green] "
        f"on [cyan]http://{bind_host}:{bind_port}[/cyan]\n"
    )

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("config")
def show_config() -> None:
    """Show the effective configuration."""
    settings = get_settings()

    table = Table(title=f"{settings.app_name} configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
