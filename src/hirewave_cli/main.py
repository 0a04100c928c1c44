"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from hirewave_analysis.heuristics import extract_keywords
from hirewave_analysis.observability import configure_logging
from hirewave_analysis.service import AnalysisOutcome, ResumeAnalysisService
from hirewave_core.config.settings import Settings
from hirewave_infra.cache.analysis_cache import DiskAnalysisCache

app = typer.Typer(
    name="hirewave",
    help="Resume analysis with generative and keyword-heuristic scoring",
)
console = Console()


def _load_settings(provider: str | None, verbose: bool) -> Settings:
    """Build settings from the environment and apply CLI overrides."""
    settings = Settings()  # type: ignore[call-arg]
    if provider:
        settings.llm_provider = provider  # type: ignore[assignment]
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _print_outcome(outcome: AnalysisOutcome, as_json: bool) -> None:
    """Render an analysis outcome as JSON or a rich table."""
    record = outcome.record
    if as_json:
        payload = record.to_result().to_wire()
        payload["source"] = record.source
        payload["cached"] = outcome.is_cached
        if outcome.error:
            payload["error"] = outcome.error
        typer.echo(json.dumps(payload, indent=2))
        return

    if outcome.error:
        console.print(f"[red]Error:[/red] {outcome.error}")

    suffix = " (cached)" if outcome.is_cached else ""
    console.print(
        f"[bold]ATS score:[/bold] {record.ats_score}  [dim]source={record.source}{suffix}[/dim]"
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Section")
    table.add_column("Items")
    table.add_row("Strengths", "\n".join(record.strengths))
    table.add_row("Weaknesses", "\n".join(record.weaknesses))
    table.add_row("Suggestions", "\n".join(record.suggestions))
    console.print(table)


@app.command()
def analyze(
    source: str = typer.Argument(..., help="Resume PDF URL or local path"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
    force: bool = typer.Option(False, "--force", help="Ignore any cached analysis"),
    no_cache: bool = typer.Option(False, "--no-cache", help="Do not read or write the cache"),
    provider: str | None = typer.Option(
        None, "--provider", help="Override llm_provider (gemini, openai, vertex, anthropic, none)"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Fetch a resume PDF and analyze it."""
    settings = _load_settings(provider, verbose)

    cache: DiskAnalysisCache | None = None
    if settings.cache_enabled and not no_cache:
        cache = DiskAnalysisCache(settings.cache_dir)

    service = ResumeAnalysisService(settings, cache=cache)
    try:
        outcome = asyncio.run(service.analyze_document(source, force=force))
    finally:
        if cache is not None:
            cache.close()

    _print_outcome(outcome, as_json)
    if outcome.error:
        raise typer.Exit(code=1)


@app.command("analyze-text")
def analyze_text(
    file: Path = typer.Argument(..., help="Plain-text resume file", exists=True),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
    provider: str | None = typer.Option(
        None, "--provider", help="Override llm_provider (gemini, openai, vertex, anthropic, none)"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Analyze resume text from a file, skipping PDF extraction and the cache."""
    settings = _load_settings(provider, verbose)
    service = ResumeAnalysisService(settings)
    outcome = asyncio.run(service.analyze_text(file.read_text(encoding="utf-8")))
    _print_outcome(outcome, as_json)


@app.command()
def keywords(
    file: Path = typer.Argument(..., help="Plain-text resume file", exists=True),
) -> None:
    """List the dictionary keywords found in a text file."""
    found = extract_keywords(file.read_text(encoding="utf-8"))
    if not found:
        console.print("[yellow]No dictionary keywords found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Category")
    table.add_column("Keyword")
    for keyword in found:
        table.add_row(keyword.category, keyword.word)
    console.print(table)
    skills = sum(1 for k in found if k.category == "skill")
    console.print(f"[dim]{len(found)} keywords, {skills} skills[/dim]")


@app.command()
def version() -> None:
    """Show version."""
    console.print("hirewave v0.1.0")


if __name__ == "__main__":
    app()
