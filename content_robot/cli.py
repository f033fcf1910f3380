"""
Command-line interface for the content robot.

Creates content documents, runs the text stage over them and shows the
resulting sentences and keywords.
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from content_robot.config import get_settings
from content_robot.models import ContentDocument
from content_robot.pipeline import create_text_robot
from content_robot.state.store import JsonStateStore
from content_robot.utils.errors import ContentRobotException
from content_robot.utils.logging import setup_logging

app = typer.Typer(
    name="content-robot",
    help="Turn a search term into keyword-annotated sentences",
    add_completion=False,
)
console = Console()

STATE_OPTION_HELP = "Path to the content document (defaults to STATE_FILE_PATH)"


def _state_store(state_path: Optional[Path]) -> JsonStateStore:
    return JsonStateStore(state_path or get_settings().state_file_path)


def _sentence_table(document: ContentDocument, title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Sentence", style="cyan")
    table.add_column("Keywords")

    for index, sentence in enumerate(document.sentences):
        table.add_row(
            str(index),
            escape(sentence.text),
            escape(", ".join(sentence.keywords)) or "-",
        )

    return table


@app.command()
def init(
    search_term: str = typer.Argument(..., help="Term that selects the source article"),
    max_sentences: Optional[int] = typer.Option(
        None,
        "--max-sentences",
        "-m",
        min=0,
        help="Maximum number of sentences to keep",
    ),
    state_path: Optional[Path] = typer.Option(None, "--state", "-s", help=STATE_OPTION_HELP),
):
    """Create a new content document for a search term."""
    store = _state_store(state_path)
    maximum = max_sentences if max_sentences is not None else get_settings().maximum_sentences

    try:
        store.initialize(search_term, maximum)
    except ContentRobotException as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] Created content document for '{search_term}' "
        f"(max {maximum} sentences) at {store.path}"
    )


@app.command()
def text(
    state_path: Optional[Path] = typer.Option(None, "--state", "-s", help=STATE_OPTION_HELP),
):
    """Fetch, sanitize, segment and enrich the article for the stored search term."""

    async def _run():
        async with create_text_robot(state_store=store) as robot:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                progress.add_task("Running text robot...", total=None)
                return await robot.run()

    store = _state_store(state_path)

    try:
        report = asyncio.run(_run())
        document = store.load()
    except ContentRobotException as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(_sentence_table(document, f"Sentences for '{document.search_term}'"))

    for failure in report.failures:
        console.print(
            f"[yellow]⚠[/yellow] No keywords for sentence {failure.index}: {escape(failure.error)}"
        )

    console.print(
        f"[green]✓[/green] {report.enriched}/{report.total} sentences enriched"
    )


@app.command()
def show(
    state_path: Optional[Path] = typer.Option(None, "--state", "-s", help=STATE_OPTION_HELP),
):
    """Show the sentences and keywords in the content document."""
    try:
        document = _state_store(state_path).load()
    except ContentRobotException as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not document.sentences:
        console.print(f"No sentences yet for '{document.search_term}'")
        return

    console.print(_sentence_table(document, f"Sentences for '{document.search_term}'"))


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Content robot - build keyword-annotated sentences from a search term."""
    log_level = "DEBUG" if debug else None
    setup_logging(log_level=log_level)


if __name__ == "__main__":
    app()
