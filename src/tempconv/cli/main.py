import typer

from .._version import __version__
from ..units import TemperatureUnit
from .config import app as config_app
from .convert import convert_command


__all__ = ["app", "run"]


app = typer.Typer(help="Parse temperature literals and convert between scales", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show tempconv version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"tempconv {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.command("convert", help="Convert a temperature literal to the other supported scales.")(convert_command)
app.add_typer(config_app, name="config")


@app.command("units")
def units_command() -> None:
    """List the supported units with their display symbol and accepted spelling."""

    for unit in TemperatureUnit:
        typer.echo(f"{unit.name.lower():<12}{unit.symbol:<4}{unit.pattern}")


def run() -> None:
    """Entry point compatible with ``python -m tempconv.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
