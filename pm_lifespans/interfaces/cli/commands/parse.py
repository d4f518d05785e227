"""Diagnostic command parsing raw name-column cells."""

import click

from pm_lifespans.domain.services.officeholder_text_parser import (
    normalize_whitespace,
    parse_officeholder_text,
)
from pm_lifespans.interfaces.cli.base import with_error_handling


@click.command()
@click.argument("cells", nargs=-1, required=True)
@with_error_handling
def parse(cells: tuple[str, ...]):
    """Parse CELLS as the source table would present them."""
    for index, cell in enumerate(cells):
        record = parse_officeholder_text(normalize_whitespace(cell), index=index)
        death = record.death_year if record.death_year is not None else "living"
        click.echo(f"{record.name}\t{record.birth_year}\t{death}")
