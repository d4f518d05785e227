"""pm-lifespans CLI command group."""

import click

from pm_lifespans.common.logging import setup_logging
from pm_lifespans.infrastructure.config.settings import get_settings
from pm_lifespans.interfaces.cli.base import with_error_handling
from pm_lifespans.interfaces.cli.commands.analyze import analyze
from pm_lifespans.interfaces.cli.commands.parse import parse


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: PM_LIFESPANS_LOG_LEVEL or INFO)",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@with_error_handling
def cli(log_level: str | None, json_logs: bool):
    """Lifespan statistics for the office-holders listed on a Wikipedia page."""
    setup_logging(log_level or get_settings().log_level, json_output=json_logs)


cli.add_command(analyze)
cli.add_command(parse)


def main() -> None:
    cli()
