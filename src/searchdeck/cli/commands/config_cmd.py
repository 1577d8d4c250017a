"""searchdeck config — configuration inspection."""

from __future__ import annotations

from pathlib import Path

import typer
import yaml

from searchdeck.core.config import find_config_file, load_config
from searchdeck.core.exceptions import ConfigError

config_app = typer.Typer(
    name="config",
    help="Configuration commands.",
    no_args_is_help=True,
)


@config_app.command(name="show")
def config_show(
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path."),
) -> None:
    """Show the merged configuration as YAML."""
    try:
        path = Path(config_path) if config_path else None
        config = load_config(config_path=path)
        data = config.model_dump(mode="json", exclude_none=True)
        output = yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
        typer.echo(output)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None


@config_app.command(name="path")
def config_path_cmd() -> None:
    """Print the config file that would be loaded."""
    path = find_config_file()
    if path is None:
        typer.echo("No config file found; using defaults.")
        raise typer.Exit(code=1)
    typer.echo(str(path))
