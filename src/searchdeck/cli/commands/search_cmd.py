"""searchdeck search — build URLs for every engine and write the report."""

from __future__ import annotations

import webbrowser
from pathlib import Path
from typing import Any

import typer

from searchdeck.core.builder import build_results
from searchdeck.core.config import load_config
from searchdeck.core.exceptions import SearchDeckError
from searchdeck.core.models import ReportStats
from searchdeck.core.query import resolve_query
from searchdeck.core.registry import EngineRegistry
from searchdeck.reporters import REPORTER_REGISTRY


def search_command(
    query: str | None = typer.Argument(None, help="Search terms. Prompted for when omitted."),
    config_path: str | None = typer.Option(
        None, "--config", "-c", help="Config file path."
    ),
    output_dir: str | None = typer.Option(
        None, "--output-dir", "-o", help="Report output directory."
    ),
    report_format: str | None = typer.Option(
        None, "--format", "-f", help="Report format: html | markdown."
    ),
    no_open: bool = typer.Option(
        False, "--no-open", help="Don't open the report in a browser."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Don't print per-engine status lines."
    ),
) -> None:
    """Build search URLs for QUERY and write a launch report."""
    overrides: dict[str, Any] = {}
    if output_dir:
        overrides["output_directory"] = output_dir
    if report_format:
        overrides["report_format"] = report_format
    if no_open:
        overrides["open_in_browser"] = False
    if quiet:
        overrides["verbose_output"] = False

    try:
        _search(query, config_path, {"options": overrides} if overrides else None)
    except SearchDeckError as e:
        typer.echo(typer.style(f"Error: {e}", fg=typer.colors.RED), err=True)
        raise typer.Exit(code=1) from None


def _search(
    query: str | None,
    config_path: str | None,
    overrides: dict[str, Any] | None,
) -> None:
    cfg_path = Path(config_path) if config_path else None
    config = load_config(config_path=cfg_path, overrides=overrides)
    options = config.options
    registry = EngineRegistry.from_config(config)

    if not (query and query.strip()) and options.prompt_for_search_terms:
        query = typer.prompt(
            "Search terms",
            default=options.default_search_terms,
            show_default=bool(options.default_search_terms),
        )
    terms = resolve_query(query, options)

    outcome = build_results(registry, terms)

    if options.verbose_output:
        typer.echo(f"\nSearch: {terms}")
        for result in outcome.visible(options.include_disabled_engines):
            if result.enabled:
                state = typer.style("ON ", fg=typer.colors.GREEN)
            else:
                state = typer.style("OFF", fg=typer.colors.YELLOW)
            typer.echo(f"  [{state}] {result.name}: {result.url}")

    for failure in outcome.failures:
        status = typer.style("FAILED", fg=typer.colors.RED)
        typer.echo(f"  [{status}] {failure.name}: {failure.error}", err=True)

    stats = ReportStats(
        total_engines=len(registry),
        enabled_engines=registry.enabled_count,
    )
    reporter = REPORTER_REGISTRY[options.report_format.value](options)
    report_path = reporter.generate(
        outcome.results, terms, stats, Path(options.output_directory)
    )

    typer.echo(
        f"\n{stats.enabled_engines} of {stats.total_engines} engines enabled"
        f", {len(outcome.failures)} failed"
    )
    typer.echo(f"Report: {report_path}")

    if options.open_in_browser:
        webbrowser.open(report_path.resolve().as_uri())
