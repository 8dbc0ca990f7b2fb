"""rb-parameters CLI entry point.

``rbp show`` renders a parameter set the way RBParameters.print does and
``rbp compare`` applies RBParameters equality to two sets given inline.
"""

import logging
import sys

import typer

from .commands import show_command, compare_command
from ..constants import DEFAULT_PRECISION

app = typer.Typer(
    name="rbp",
    help="Render and compare reduced-basis parameter sets given as name=value pairs",
    invoke_without_command=True,
)

app.command("show", help="Print primary and extra parameters in scientific notation")(show_command)
app.command("compare", help="Compare the primary parameters of two sets")(compare_command)


@app.command("version")
def version():
    """Show the package version and the built-in rendering precision."""
    from .. import __version__
    typer.echo(f"rb-parameters {__version__} (default precision {DEFAULT_PRECISION})")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parameter counts and comparison results")
):
    """Render and compare reduced-basis parameter sets."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        typer.echo("\nError: choose one of show, compare or version.", err=True)
        raise typer.Exit(1)


def cli_main():
    """Console-script entry point for ``rbp``."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\nAborted", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
