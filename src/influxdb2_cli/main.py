"""Main entry point for the InfluxDB 2 CLI."""

import typer
from rich.console import Console

from influxdb2_cli import __version__
from influxdb2_cli.commands import config, labels, tasks

app = typer.Typer(
    name="influxdb2",
    help="Command-line client for the InfluxDB 2.x HTTP API",
    no_args_is_help=True,
)

console = Console()

app.add_typer(labels.app, name="labels", help="Label management commands")
app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]influxdb2-cli[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
