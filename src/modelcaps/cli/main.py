"""modelcaps CLI entry point: Click group with subcommands."""

import logging

import click

from modelcaps import __version__


@click.group()
@click.version_option(version=__version__, prog_name="modelcaps")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """modelcaps - capability registry for hosted language models."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from modelcaps.cli.models import models  # noqa: E402
from modelcaps.cli.validate import validate  # noqa: E402
from modelcaps.cli.signin import open_page, sign_in  # noqa: E402

cli.add_command(models)
cli.add_command(validate)
cli.add_command(sign_in)
cli.add_command(open_page)
