"""searchdeck validate — config file and engine registry validation."""

from __future__ import annotations

from pathlib import Path

import typer

from searchdeck.core.config import load_config
from searchdeck.core.exceptions import ConfigError
from searchdeck.core.registry import EngineRegistry


def validate_command(
    path: str = typer.Argument(help="Config YAML file path."),
) -> None:
    """Validate a config file: options and every engine descriptor."""
    config_path = Path(path)

    if not config_path.is_file():
        typer.echo(
            typer.style(f"Config file does not exist: {path}", fg=typer.colors.RED),
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config = load_config(config_path=config_path)
        registry = EngineRegistry.from_config(config)
    except ConfigError as e:
        status = typer.style("ERROR", fg=typer.colors.RED)
        typer.echo(f"  {config_path.name}: {status} - {e}")
        raise typer.Exit(code=1) from None

    status = typer.style("OK", fg=typer.colors.GREEN)
    source = "configured" if config.engines else "built-in"
    typer.echo(f"  {config_path.name}: {status}")
    typer.echo(
        f"{len(registry)} {source} engine(s), {registry.enabled_count} enabled"
    )
