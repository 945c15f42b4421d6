"""
CLI Main - Typer-based command-line interface.

Usage:
    portfolio serve --port 3000
    portfolio projects
    portfolio skills
    portfolio contact "Ana" a@example.com "Hello!"
"""

from __future__ import annotations

import logging
import os

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from portfolio.config import get_settings
from portfolio.domains.catalog import StaticCatalog

app = typer.Typer(
    name="portfolio",
    help="Portfolio - Personal portfolio website backend",
    add_completion=False,
)
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind (default: PORT)"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    _configure_logging(settings.log_level)

    # The factory builds its own Settings, in this process or a reload worker
    os.environ["HOST"] = host
    os.environ["PORT"] = str(port)
    get_settings.cache_clear()

    console.print("\n[green]Starting portfolio backend[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]\n")

    uvicorn.run(
        "portfolio.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_config=None,
    )


@app.command()
def projects() -> None:
    """List portfolio projects."""
    table = Table(title="Projects")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Status")
    table.add_column("Technologies", style="dim")
    table.add_column("GitHub", style="blue")

    for project in StaticCatalog().projects():
        table.add_row(
            str(project.id),
            project.title,
            _status_color(project.status.value),
            ", ".join(project.technologies),
            project.github,
        )

    console.print(table)


@app.command()
def skills() -> None:
    """List skills by category."""
    table = Table(title="Skills")
    table.add_column("Category", style="cyan")
    table.add_column("Skills", style="green")

    for category, names in StaticCatalog().skills().items():
        table.add_row(category, ", ".join(names))

    console.print(table)


def _status_color(status: str) -> str:
    """Color-code project status."""
    colors = {
        "completed": "[green]completed[/green]",
        "in-progress": "[yellow]in-progress[/yellow]",
    }
    return colors.get(status, status)


@app.command()
def contact(
    name: str = typer.Argument(..., help="Sender name"),
    email: str = typer.Argument(..., help="Sender email"),
    message: str = typer.Argument(..., help="Message body"),
    url: str | None = typer.Option(None, "--url", "-u", help="Server base URL"),
) -> None:
    """Send a contact form submission to a running server."""
    base_url = url or f"http://localhost:{get_settings().port}"

    try:
        response = httpx.post(
            f"{base_url.rstrip('/')}/api/contact",
            json={"name": name, "email": email, "message": message},
            timeout=10.0,
        )
        body = response.json()
    except (httpx.HTTPError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    style = "green" if body.get("success") else "red"
    console.print(
        Panel(
            body.get("message", ""),
            title=f"HTTP {response.status_code}",
            style=style,
        )
    )
    if not body.get("success"):
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from portfolio import __version__

    console.print(f"Portfolio v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
