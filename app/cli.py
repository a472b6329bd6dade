"""
Pib Journal CLI Tool

Command-line client for the journal API.

Usage:
    journal serve                 - Start the API server
    journal login                 - Print a bearer token
    journal list                  - List all entries
    journal write "title" "body"  - Post a new entry
"""
import os
import sys

import click
import httpx
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from app import __version__

# Load environment variables
load_dotenv()

console = Console()

# API Configuration
API_BASE = os.getenv("JOURNAL_API_URL", "http://localhost:3000")


def fail(response: httpx.Response) -> None:
    """Print the server's reason for a failed request and exit."""
    reason = response.text.strip() or response.reason_phrase
    console.print(f"[red]✗ {response.status_code}: {reason}[/red]")
    sys.exit(1)


def check_server() -> bool:
    """Check if the API server is running."""
    try:
        response = httpx.get(f"{API_BASE}/", timeout=2.0)
        return response.status_code == 200
    except (httpx.ConnectError, httpx.TimeoutException):
        return False


def require_server() -> None:
    if not check_server():
        console.print(f"[red]✗ Could not connect to API server at {API_BASE}[/red]")
        console.print("\nStart it with:")
        console.print("[yellow]journal serve[/yellow]")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="Pib Journal")
def main():
    """
    Pib Journal - a tiny personal journal.

    Talks to the journal API at JOURNAL_API_URL (default http://localhost:3000).
    """
    pass


@main.command()
@click.option("--port", default=None, type=int, help="Port to run server on")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(port: int | None, reload: bool):
    """
    Start the journal API server.

    Example:
        journal serve --port 3000
    """
    import uvicorn

    from app.config import get_settings

    settings = get_settings()
    port = port or settings.PORT
    console.print(f"[green]✓[/green] Starting server on [cyan]http://localhost:{port}[/cyan]")
    uvicorn.run("app.main:app", host=settings.HOST, port=port, reload=reload)


@main.command()
@click.option("--username", prompt=True, help="Admin username")
@click.option("--password", prompt=True, hide_input=True, help="Admin password")
def login(username: str, password: str):
    """
    Log in and print a bearer token.

    Example:
        export JOURNAL_TOKEN=$(journal login --username admin --password secret)
    """
    try:
        response = httpx.post(
            f"{API_BASE}/api/login",
            json={"username": username, "password": password},
            timeout=30.0,
        )
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if response.status_code != 200:
        fail(response)

    click.echo(response.json()["token"])


@main.command(name="list")
def list_entries():
    """
    List all journal entries, oldest first.

    Example:
        journal list
    """
    require_server()

    try:
        response = httpx.get(f"{API_BASE}/api/entries", timeout=30.0)
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if response.status_code != 200:
        fail(response)

    entries = response.json()
    if not entries:
        console.print("[yellow]No entries yet. Write one with:[/yellow]")
        console.print("[cyan]journal write \"title\" \"body\"[/cyan]")
        return

    table = Table(title=f"📓 Entries ({len(entries)} total)", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("ID", style="dim")

    for entry in entries:
        table.add_row(
            entry.get("date", ""),
            entry.get("title", ""),
            entry.get("id", ""),
        )

    console.print(table)


@main.command()
@click.argument("title")
@click.argument("body")
@click.option("--token", envvar="JOURNAL_TOKEN", required=True, help="Bearer token (or JOURNAL_TOKEN)")
def write(title: str, body: str, token: str):
    """
    Post a new journal entry.

    Example:
        journal write "Day 1" "Went well"
    """
    require_server()

    try:
        response = httpx.post(
            f"{API_BASE}/api/entries",
            json={"title": title, "body": body},
            headers={"Authorization": f"Bearer {token}"},
            timeout=30.0,
        )
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if response.status_code != 201:
        fail(response)

    console.print(Panel(
        f"[bold cyan]{title}[/bold cyan]\n{body}",
        title="✓ Entry saved",
        border_style="green",
    ))
    console.print(f"ID: [cyan]{response.json()['id']}[/cyan]")


if __name__ == "__main__":
    main()
