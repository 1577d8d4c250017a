"""searchdeck CLI entry point."""

import logging

import typer

app = typer.Typer(
    name="searchdeck",
    help="searchdeck — build search URLs for many engines and open them from one page",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        from searchdeck import __version__

        typer.echo(f"searchdeck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level: DEBUG | INFO | WARNING | ERROR.",
    ),
) -> None:
    """searchdeck — build search URLs for many engines and open them from one page."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


# -- Register commands --------------------------------------------------------

from searchdeck.cli.commands.config_cmd import config_app  # noqa: E402
from searchdeck.cli.commands.engines_cmd import engines_command  # noqa: E402
from searchdeck.cli.commands.init_cmd import init_command  # noqa: E402
from searchdeck.cli.commands.preview_cmd import preview_command  # noqa: E402
from searchdeck.cli.commands.search_cmd import search_command  # noqa: E402
from searchdeck.cli.commands.validate_cmd import validate_command  # noqa: E402

app.command(name="search")(search_command)
app.command(name="preview")(preview_command)
app.command(name="engines")(engines_command)
app.command(name="init")(init_command)
app.command(name="validate")(validate_command)
app.add_typer(config_app, name="config")
