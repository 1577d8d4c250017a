"""searchdeck preview — print built URLs without writing a report."""

from __future__ import annotations

from pathlib import Path

import typer

from searchdeck.core.builder import build_results
from searchdeck.core.config import load_config
from searchdeck.core.exceptions import SearchDeckError
from searchdeck.core.query import resolve_query
from searchdeck.core.registry import EngineRegistry


def preview_command(
    query: str = typer.Argument(help="Search terms."),
    config_path: str | None = typer.Option(
        None, "--config", "-c", help="Config file path."
    ),
    enabled_only: bool = typer.Option(
        False, "--enabled-only", help="Only print enabled engines."
    ),
) -> None:
    """Print one 'name<TAB>url' line per engine."""
    try:
        cfg_path = Path(config_path) if config_path else None
        config = load_config(config_path=cfg_path)
        registry = EngineRegistry.from_config(config)
        terms = resolve_query(query, config.options)
    except SearchDeckError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None

    outcome = build_results(registry, terms)
    include_disabled = config.options.include_disabled_engines and not enabled_only
    for result in outcome.visible(include_disabled):
        typer.echo(f"{result.name}\t{result.url}")

    for failure in outcome.failures:
        typer.echo(f"{failure.name}\tERROR: {failure.error}", err=True)
