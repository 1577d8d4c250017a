"""searchdeck init — write a starter config file."""

from __future__ import annotations

from pathlib import Path

import typer

from searchdeck.core.config import DEFAULT_CONFIG_FILENAME, save_config
from searchdeck.core.models import Config, SearchOptions
from searchdeck.core.registry import DEFAULT_ENGINES


def init_command(
    default_terms: str = typer.Option(
        "", "--default-terms", "-d", help="Fallback search terms."
    ),
    output_dir: str = typer.Option(
        "search_results", "--output-dir", "-o", help="Report output directory."
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    """Create searchdeck.config.yaml with the built-in engines in the current directory."""
    config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    if config_path.exists() and not force:
        typer.echo(f"Config already exists: {config_path} (use --force)", err=True)
        raise typer.Exit(code=1)

    config = Config(
        engines=list(DEFAULT_ENGINES),
        options=SearchOptions(
            default_search_terms=default_terms,
            output_directory=output_dir,
        ),
    )
    save_config(config, config_path)

    typer.echo("searchdeck config initialized.")
    typer.echo(f"  Config: {config_path}")
    typer.echo(f"  Engines: {len(config.engines)}")
