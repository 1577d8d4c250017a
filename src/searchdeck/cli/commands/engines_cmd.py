"""searchdeck engines — list the engine registry."""

from __future__ import annotations

from pathlib import Path

import typer

from searchdeck.core.config import load_config
from searchdeck.core.exceptions import SearchDeckError
from searchdeck.core.registry import EngineRegistry


def engines_command(
    config_path: str | None = typer.Option(
        None, "--config", "-c", help="Config file path."
    ),
    enabled_only: bool = typer.Option(
        False, "--enabled-only", help="Hide disabled engines."
    ),
) -> None:
    """List configured engines in registry order."""
    try:
        cfg_path = Path(config_path) if config_path else None
        registry = EngineRegistry.from_config(load_config(config_path=cfg_path))
    except SearchDeckError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None

    for index, engine in enumerate(registry, start=1):
        if enabled_only and not engine.enabled:
            continue
        if engine.enabled:
            state = typer.style("enabled ", fg=typer.colors.GREEN)
        else:
            state = typer.style("disabled", fg=typer.colors.YELLOW)
        typer.echo(f"{index:>3}. {engine.name:<20} {state} {engine.kind.value:<9} {engine.category}")

    typer.echo("")
    typer.echo(f"{registry.enabled_count} of {len(registry)} engines enabled")
