"""Interactive CLI for the Fake News Detector using Typer and Rich."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from fakenews_detector import __version__
from fakenews_detector.cli import render
from fakenews_detector.config.logging import get_logger
from fakenews_detector.config.settings import settings
from fakenews_detector.shell import DetectorSession, EmptyTextError, validate_text

app = typer.Typer(
    help="Fake News Detection System - credibility scoring for news and social media text",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is not None:
        return text
    return typer.prompt("Enter social media post or content to analyze", err=True)


@app.command()
def analyze(
    text: Optional[str] = typer.Argument(None, help="Text to analyze (prompted if omitted)"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, readable=True,
        help="Read the text to analyze from a file",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    show_progress: bool = typer.Option(True, "--progress/--no-progress", help="Show the progress bar"),
) -> None:
    """
    Analyze text for credibility and display the report.

    Args:
        text: Text to analyze
        file: File to read the text from instead
        as_json: Emit JSON instead of the dashboard
        show_progress: Animate the scripted progress bar
    """
    content = _read_input(text, file)

    try:
        validate_text(content)
    except EmptyTextError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        raise typer.Exit(1)

    logger.info("Analyze command invoked", text_length=len(content))

    if show_progress and not as_json:
        with Progress(
            TextColumn("[bold cyan]Analysis Progress"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("analysis", total=100)
            session = DetectorSession(
                on_progress=lambda value: progress.update(task, completed=value),
            )
            notice = asyncio.run(session.submit(content))
    else:
        session = DetectorSession(step_delay=0.0)
        notice = asyncio.run(session.submit(content))

    if notice.is_error or session.result is None:
        console.print(f"\n[red]✗[/red] {notice.title}: {notice.description}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(session.result.to_json())
        return

    console.print(render.report(session.result))
    console.print(f"\n[green]✓[/green] {notice.title}: {notice.description}")


@app.command()
def rules() -> None:
    """List every pattern rule used for scoring."""
    console.print(render.rules_table())


@app.command()
def status() -> None:
    """
    Display system status and configuration.

    Shows the sentiment model configuration and logging settings.
    """
    logger.info("Displaying system status")

    table = Table(title="Fake News Detector Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=15)
    table.add_column("Details", style="yellow")

    python_version = f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    table.add_row("Environment", "✓ Ready", python_version)

    sentiment_status = "✓ Enabled" if settings.sentiment_enabled else "✗ Disabled"
    device = "cpu" if settings.sentiment_device < 0 else f"cuda:{settings.sentiment_device}"
    table.add_row("Sentiment Model", sentiment_status, f"{settings.sentiment_model} ({device})")

    steps = ", ".join(str(step) for step in settings.progress_steps)
    table.add_row("Progress", "✓ Scripted", f"{steps} @ {settings.progress_step_delay}s")

    log_details = f"Level: {settings.log_level}, Format: {settings.log_format}"
    table.add_row("Logging", "✓ Active", log_details)

    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]Fake News Detection System[/bold]")
    console.print(f"Version: {__version__}")


if __name__ == "__main__":
    app()
