"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from codderlly.cli.commands import check_cmd, export_cmd, list_cmd, new_cmd, site_cmd
from codderlly.logging import configure_logging


app = typer.Typer(name="codderlly", no_args_is_help=True, help="Codderlly blog content and site configuration")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Codderlly blog content and site configuration."""
    configure_logging(verbose=verbose)


app.command(name="check")(check_cmd)
app.command(name="list")(list_cmd)
app.command(name="site")(site_cmd)
app.command(name="export")(export_cmd)
app.command(name="new")(new_cmd)
