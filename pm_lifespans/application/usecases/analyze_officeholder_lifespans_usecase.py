"""Office-holder lifespan analysis use case.

Runs the pipeline over an already-fetched document.

Flow:
    1. Extract the de-duplicated name-column cells from the data table
    2. Parse each cell into name and life years
    3. Derive age at death and chart spans
    4. Compute summary statistics over the deceased
"""

from pm_lifespans.application.dtos.lifespan_analysis_dto import (
    AnalyzeLifespansInputDto,
    AnalyzeLifespansOutputDto,
)
from pm_lifespans.common.logging import get_logger
from pm_lifespans.domain.exceptions import EmptyDatasetError, ParseError
from pm_lifespans.domain.services.lifespan_statistics_service import (
    build_lifespan_spans,
    compute_summary_stats,
    derive_records,
)
from pm_lifespans.domain.services.officeholder_text_parser import (
    parse_officeholder_text,
)
from pm_lifespans.domain.value_objects.officeholder_record import ParsedRecord
from pm_lifespans.infrastructure.importers.wikipedia_table_extractor import (
    extract_raw_records,
)


logger = get_logger(__name__)


class AnalyzeOfficeholderLifespansUseCase:
    """Lifespan analysis of the office-holders listed on one page."""

    def execute(self, input_dto: AnalyzeLifespansInputDto) -> AnalyzeLifespansOutputDto:
        """Run the analysis.

        Raises:
            ExtractionError: data table or name column missing
            ParseError: unparseable row while ``skip_unparseable`` is False
            InvalidCurrentYearError: ``current_year`` precedes a living birth year
        """
        output = AnalyzeLifespansOutputDto()

        raw_records = extract_raw_records(
            input_dto.html,
            table_class=input_dto.table_class,
            name_column=input_dto.name_column,
        )
        output.total_rows = len(raw_records)

        parsed: list[ParsedRecord] = []
        for raw in raw_records:
            try:
                parsed.append(parse_officeholder_text(raw.text, index=raw.index))
            except ParseError as e:
                if not input_dto.skip_unparseable:
                    raise
                logger.warning("skipping unparseable row: %s", e)
                output.parse_errors.append(e)

        logger.info(
            "parsed %d of %d rows (%d skipped)",
            len(parsed),
            len(raw_records),
            len(output.parse_errors),
        )

        output.records = derive_records(parsed)
        output.spans = build_lifespan_spans(output.records, input_dto.current_year)

        try:
            output.summary = compute_summary_stats(output.records)
        except EmptyDatasetError as e:
            logger.warning("summary statistics unavailable: %s", e)

        return output
