"""Lifespan analysis command."""

from pathlib import Path

import click

from pm_lifespans.application.dtos.lifespan_analysis_dto import (
    AnalyzeLifespansInputDto,
)
from pm_lifespans.application.usecases.analyze_officeholder_lifespans_usecase import (
    AnalyzeOfficeholderLifespansUseCase,
)
from pm_lifespans.infrastructure.config.settings import get_settings
from pm_lifespans.infrastructure.importers.wikipedia_page_fetcher import (
    fetch_cached_html,
)
from pm_lifespans.interfaces.cli.base import with_error_handling
from pm_lifespans.interfaces.presenters.lifespan_presenter import LifespanPresenter


@click.command()
@click.option("--url", default=None, help="Source page URL")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the cached page",
)
@click.option("--refresh", is_flag=True, help="Ignore the cached page and re-fetch")
@click.option(
    "--current-year",
    type=int,
    default=None,
    help="End year drawn for living office-holders",
)
@click.option(
    "--chart",
    "chart_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the lifespan chart to this file (PNG, SVG, PDF)",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the records table as CSV",
)
@click.option(
    "--skip-unparseable",
    is_flag=True,
    help="Skip rows that cannot be parsed instead of aborting",
)
@with_error_handling
def analyze(
    url: str | None,
    cache_dir: Path | None,
    refresh: bool,
    current_year: int | None,
    chart_path: Path | None,
    csv_path: Path | None,
    skip_unparseable: bool,
):
    """Fetch the page, parse every office-holder and print lifespan statistics."""
    settings = get_settings()

    source_url = url or settings.source_url
    year = current_year if current_year is not None else settings.current_year

    html = fetch_cached_html(
        source_url,
        cache_dir or settings.cache_dir,
        refresh=refresh,
        timeout=settings.request_timeout,
        user_agent=settings.user_agent,
    )

    result = AnalyzeOfficeholderLifespansUseCase().execute(
        AnalyzeLifespansInputDto(
            html=html,
            current_year=year,
            table_class=settings.table_class,
            name_column=settings.name_column,
            skip_unparseable=skip_unparseable,
        )
    )

    presenter = LifespanPresenter()
    records_df = presenter.records_to_dataframe(result.records)

    click.echo(
        f"=== Office-holders ({result.deceased_count} deceased, "
        f"{result.living_count} living) ==="
    )
    click.echo(presenter.to_text(records_df))

    if result.parse_errors:
        click.echo(f"\n=== Skipped rows ({len(result.parse_errors)}) ===")
        for error in result.parse_errors:
            click.echo(f"  {error}")

    click.echo("\n=== Summary ===")
    if result.summary is None:
        click.echo("No deceased office-holders; summary statistics unavailable.")
    else:
        click.echo(presenter.to_text(presenter.summary_to_dataframe(result.summary)))

    if csv_path is not None:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        records_df.to_csv(csv_path, index=False)
        click.echo(f"\nRecords written to {csv_path}")

    if chart_path is not None:
        from pm_lifespans.infrastructure.reporting.lifespan_chart_renderer import (
            render_lifespan_chart,
        )

        render_lifespan_chart(result.spans, year, chart_path)
        click.echo(f"Chart written to {chart_path}")
