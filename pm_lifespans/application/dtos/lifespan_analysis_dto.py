"""DTOs for the lifespan analysis use case."""

from dataclasses import dataclass, field

from pm_lifespans.domain.exceptions import ParseError
from pm_lifespans.domain.value_objects.officeholder_record import (
    DerivedRecord,
    LifespanSpan,
    SummaryStats,
)
from pm_lifespans.infrastructure.config.settings import DEFAULT_NAME_COLUMN


@dataclass
class AnalyzeLifespansInputDto:
    """Input for the lifespan analysis.

    ``skip_unparseable`` selects the parse-error policy: False aborts on the
    first unparseable row, True skips it and reports it in the output.
    """

    html: str | bytes
    current_year: int
    table_class: str = "wikitable"
    name_column: str = DEFAULT_NAME_COLUMN
    skip_unparseable: bool = False


@dataclass
class AnalyzeLifespansOutputDto:
    """Output of the lifespan analysis."""

    records: list[DerivedRecord] = field(default_factory=lambda: list[DerivedRecord]())
    spans: list[LifespanSpan] = field(default_factory=lambda: list[LifespanSpan]())
    summary: SummaryStats | None = None
    parse_errors: list[ParseError] = field(default_factory=lambda: list[ParseError]())
    total_rows: int = 0

    @property
    def living_count(self) -> int:
        return sum(1 for r in self.records if r.is_living)

    @property
    def deceased_count(self) -> int:
        return len(self.records) - self.living_count
