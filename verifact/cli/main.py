"""Command line interface for VeriFact using Typer and Rich."""

import asyncio
import time
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from verifact import __version__
from verifact.config.logging import configure_structured_logging, get_logger
from verifact.config.settings import settings
from verifact.extractors import extract_page, fetch_page
from verifact.formatting import render_report
from verifact.llm.gemini_client import GeminiTextService, GeminiTranslationService
from verifact.llm.services import Availability
from verifact.pipeline import CredibilityAnalyzer, EmptyContentError, ServiceStatus
from verifact.probes import is_news_page
from verifact.schemas import PageMetadata

app = typer.Typer(
    help="VeriFact - news credibility analysis",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")

_STATUS_STYLE = {
    ServiceStatus.READY: ("✓ AI services ready", "green"),
    ServiceStatus.PARTIAL: ("⚠ Some AI services unavailable", "yellow"),
    ServiceStatus.UNAVAILABLE: ("✗ AI services not available", "red"),
}


def _build_analyzer() -> CredibilityAnalyzer:
    return CredibilityAnalyzer(
        text_service=GeminiTextService(),
        translation_service=GeminiTranslationService(),
    )


def _availability_cell(availability: Availability) -> str:
    return "✓ Available" if availability is Availability.AVAILABLE else "✗ Unavailable"


@app.callback()
def main() -> None:
    configure_structured_logging()


@app.command()
def status() -> None:
    """
    Display configuration and AI service availability.

    Analysis still runs when services are unavailable; model-backed sections
    of the report are then marked unavailable.
    """
    analyzer = _build_analyzer()
    check = asyncio.run(analyzer.check_services())

    table = Table(title="VeriFact Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=15)
    table.add_column("Details", style="yellow")

    table.add_row(
        "Text generation",
        _availability_cell(check.text_generation),
        f"{settings.gemini_model} (temperature {settings.gemini_temperature})",
    )
    table.add_row(
        "Translation",
        _availability_cell(check.translation),
        f"target language: {settings.base_language}",
    )
    table.add_row(
        "Analysis",
        "✓ Active",
        f"max {settings.content_max_chars} chars, outdated after "
        f"{settings.outdated_after_days} days",
    )
    table.add_row("Logging", "✓ Active", f"Level: {settings.log_level}, Format: {settings.log_format}")

    console.print(table)
    message, style = _STATUS_STYLE[check.status]
    console.print(f"[{style}]{message}[/{style}]")


def _load_document(path: Path, hostname: Optional[str]) -> tuple[str, PageMetadata]:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".html", ".htm"}:
        page = extract_page(raw)
        metadata = page.metadata
        text = page.text
    else:
        metadata = PageMetadata(title=path.stem)
        text = raw
    if hostname:
        metadata = metadata.model_copy(update={"hostname": hostname.lower()})
    return text, metadata


@app.command()
def analyze(
    path: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="HTML or text file to analyze"
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Fetch and analyze this page"),
    hostname: Optional[str] = typer.Option(
        None, "--hostname", help="Hostname to rate when analyzing a local file"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """
    Analyze a news article and print its credibility report.
    """
    if (path is None) == (url is None):
        console.print("[red]✗[/red] Give either a file PATH or --url")
        raise typer.Exit(2)

    if url is not None:
        try:
            page = asyncio.run(fetch_page(url))
        except httpx.HTTPError as e:
            console.print(f"[red]✗[/red] Could not fetch {url}: {e}")
            raise typer.Exit(1)
        text, metadata = page.text, page.metadata
    else:
        text, metadata = _load_document(path, hostname)

    if metadata.url and not is_news_page(metadata.url, metadata.title):
        console.print("[dim]This page does not look like a news article.[/dim]")

    analyzer = _build_analyzer()
    start_time = time.time()
    try:
        report = asyncio.run(analyzer.analyze(text, metadata))
    except EmptyContentError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        logger.warning(f"Analysis aborted: {e}")
        raise typer.Exit(1)
    elapsed = time.time() - start_time

    if as_json:
        console.print_json(report.model_dump_json())
        return

    console.print(Panel(Markdown(render_report(report)), title="VeriFact Analysis", border_style="green"))
    unavailable = report.unavailable_probes()
    console.print(
        f"\n[green]✓[/green] Analysis finished in {elapsed:.2f}s"
        + (f" ([yellow]{len(unavailable)} probes unavailable[/yellow])" if unavailable else "")
    )


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]VeriFact[/bold]")
    console.print(f"Version: {__version__}")


if __name__ == "__main__":
    app()
