import typer

from .._version import __version__
from .calibrate import calibrate_command, scan_command
from .config import app as config_app


__all__ = ["app", "run"]


app = typer.Typer(help="Calibration value extraction from free text", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show calibrex version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"calibrex {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.command("calibrate", help="Sum the calibration values of a text file.")(calibrate_command)
app.command("scan", help="Show the digits found in a single line.")(scan_command)
app.add_typer(config_app, name="config")


def run() -> None:
    """Entry point compatible with ``python -m calibrex.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
