"""CLI command: modelcaps validate -- check the built-in catalog."""

from __future__ import annotations

import sys

import click

from modelcaps.catalog import AVAILABLE_MODELS
from modelcaps.diagnostic import Severity
from modelcaps.validation import dump_record
from modelcaps.validation import validate as run_validate


@click.command()
def validate() -> None:
    """Validate the built-in model catalog.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors.
    """
    diagnostics = run_validate(AVAILABLE_MODELS)

    if not diagnostics:
        click.echo(f"OK: {len(AVAILABLE_MODELS)} models, 0 diagnostics")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.is_error:
            click.echo(dump_record(diag.record))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
