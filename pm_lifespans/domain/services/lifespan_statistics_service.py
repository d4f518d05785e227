"""Lifespan statistics over parsed office-holder records."""

from collections.abc import Sequence

from pm_lifespans.common.logging import get_logger
from pm_lifespans.domain.exceptions import EmptyDatasetError, InvalidCurrentYearError
from pm_lifespans.domain.value_objects.officeholder_record import (
    DerivedRecord,
    LifespanSpan,
    ParsedRecord,
    SummaryStats,
)


logger = get_logger(__name__)


def derive_records(records: Sequence[ParsedRecord]) -> list[DerivedRecord]:
    """Attach age at death to every record (None for the living)."""
    return [DerivedRecord.from_parsed(record) for record in records]


def build_lifespan_spans(
    records: Sequence[DerivedRecord], current_year: int
) -> list[LifespanSpan]:
    """Build chart spans, ending living records at ``current_year``.

    The substitution is for display only; ``age_at_death`` is untouched.

    Raises:
        InvalidCurrentYearError: ``current_year`` precedes a living birth year
    """
    spans: list[LifespanSpan] = []
    for record in records:
        if record.death_year is None:
            if current_year < record.birth_year:
                raise InvalidCurrentYearError(
                    current_year, record.birth_year, record.name
                )
            end_year = current_year
        else:
            end_year = record.death_year
        spans.append(
            LifespanSpan(
                name=record.name,
                start_year=record.birth_year,
                end_year=end_year,
                is_living=record.is_living,
            )
        )
    return spans


def compute_summary_stats(records: Sequence[DerivedRecord]) -> SummaryStats:
    """Compute min, max and average age at death.

    Only records with an age at death take part. On ties the first record
    in input order provides ``min_age_name``/``max_age_name``; every tied
    name is kept in ``min_age_names``/``max_age_names``.

    Raises:
        EmptyDatasetError: no deceased records
    """
    deceased = [r for r in records if r.age_at_death is not None]
    if not deceased:
        raise EmptyDatasetError(total_records=len(records))

    ages = [r.age_at_death for r in deceased if r.age_at_death is not None]
    min_age = round(min(ages))
    max_age = round(max(ages))
    average_age = round(sum(ages) / len(ages))

    min_names = tuple(r.name for r in deceased if r.age_at_death == min_age)
    max_names = tuple(r.name for r in deceased if r.age_at_death == max_age)

    logger.info(
        "summary over %d deceased records: min=%d max=%d average=%d",
        len(deceased),
        min_age,
        max_age,
        average_age,
    )

    return SummaryStats(
        min_age=min_age,
        min_age_name=min_names[0],
        max_age=max_age,
        max_age_name=max_names[0],
        average_age=average_age,
        min_age_names=min_names,
        max_age_names=max_names,
        sample_size=len(deceased),
    )
