"""Lifespan statistics service tests."""

import pytest

from pm_lifespans.domain.exceptions import (
    EmptyDatasetError,
    InvalidCurrentYearError,
    LifespanAnalysisError,
)
from pm_lifespans.domain.services.lifespan_statistics_service import (
    build_lifespan_spans,
    compute_summary_stats,
    derive_records,
)
from pm_lifespans.domain.value_objects.officeholder_record import (
    DerivedRecord,
    LifespanSpan,
    ParsedRecord,
)


def _deceased(name: str, birth: int, age: int) -> DerivedRecord:
    return DerivedRecord(
        name=name, birth_year=birth, death_year=birth + age, age_at_death=age
    )


def _living(name: str, birth: int) -> DerivedRecord:
    return DerivedRecord(name=name, birth_year=birth)


class TestDeriveRecords:
    """Deriving age at death."""

    def test_age_at_death(self) -> None:
        """Age is death year minus birth year."""
        result = derive_records(
            [ParsedRecord(name="Edmund Barton", birth_year=1849, death_year=1920)]
        )
        assert result[0].age_at_death == 71

    def test_living_has_no_age(self) -> None:
        """Living records keep no age and no death year."""
        result = derive_records([ParsedRecord(name="Anthony Albanese", birth_year=1963)])
        assert result[0].age_at_death is None
        assert result[0].death_year is None

    def test_order_preserved(self) -> None:
        """Output order follows input order."""
        records = [
            ParsedRecord(name="A", birth_year=1900, death_year=1970),
            ParsedRecord(name="B", birth_year=1950),
            ParsedRecord(name="C", birth_year=1910, death_year=1990),
        ]
        assert [r.name for r in derive_records(records)] == ["A", "B", "C"]


class TestBuildLifespanSpans:
    """Chart spans for deceased and living records."""

    def test_deceased_span_ends_at_death(self) -> None:
        """Deceased spans run from birth to death."""
        spans = build_lifespan_spans([_deceased("A", 1849, 71)], current_year=2026)
        assert spans == [
            LifespanSpan(name="A", start_year=1849, end_year=1920, is_living=False)
        ]

    def test_living_span_ends_at_current_year(self) -> None:
        """Living spans end at the current year."""
        living = _living("B", 1963)
        spans = build_lifespan_spans([living], current_year=2026)
        assert spans[0].end_year == 2026
        assert spans[0].is_living
        # display substitution never leaks into the record
        assert living.age_at_death is None
        assert living.death_year is None

    def test_current_year_before_birth_raises(self) -> None:
        """A current year before a living birth year is a domain error."""
        with pytest.raises(InvalidCurrentYearError, match="current_year") as exc_info:
            build_lifespan_spans([_living("B", 1963)], current_year=1950)
        error = exc_info.value
        assert isinstance(error, LifespanAnalysisError)
        assert isinstance(error, ValueError)
        assert (error.current_year, error.birth_year, error.name) == (1950, 1963, "B")


class TestComputeSummaryStats:
    """Summary statistics over the deceased subset."""

    def test_basic_scenario(self) -> None:
        """Minimum, maximum and rounded mean over three records."""
        records = [
            _deceased("A", 1849, 71),
            _deceased("B", 1856, 79),
            _deceased("C", 1862, 85),
        ]
        stats = compute_summary_stats(records)
        assert stats.min_age == 71
        assert stats.min_age_name == "A"
        assert stats.max_age == 85
        assert stats.max_age_name == "C"
        assert stats.average_age == 78
        assert stats.sample_size == 3

    def test_living_records_ignored(self) -> None:
        """Living records take no part in the statistics."""
        records = [_deceased("A", 1900, 60), _living("B", 1930), _deceased("C", 1900, 80)]
        stats = compute_summary_stats(records)
        assert stats.sample_size == 2
        assert stats.average_age == 70

    def test_ties_first_match_wins(self) -> None:
        """The first tied record provides the reported name."""
        records = [
            _deceased("First", 1900, 71),
            _deceased("Second", 1910, 71),
            _deceased("Old", 1800, 90),
            _deceased("AlsoOld", 1820, 90),
        ]
        stats = compute_summary_stats(records)
        assert stats.min_age_name == "First"
        assert stats.min_age_names == ("First", "Second")
        assert stats.max_age_name == "Old"
        assert stats.max_age_names == ("Old", "AlsoOld")

    def test_single_record(self) -> None:
        """One record is its own minimum, maximum and average."""
        stats = compute_summary_stats([_deceased("Only", 1900, 64)])
        assert stats.min_age == stats.max_age == stats.average_age == 64

    @pytest.mark.parametrize(
        "ages",
        [[71, 79, 85], [50, 51], [60, 60, 99], [1, 2, 3, 4], [88]],
    )
    def test_average_between_bounds(self, ages: list[int]) -> None:
        """The average never leaves the min/max range."""
        records = [_deceased(f"P{i}", 1800 + i, age) for i, age in enumerate(ages)]
        stats = compute_summary_stats(records)
        assert stats.min_age <= stats.average_age <= stats.max_age

    def test_no_deceased_raises(self) -> None:
        """A living-only input has no summary."""
        with pytest.raises(EmptyDatasetError) as exc_info:
            compute_summary_stats([_living("A", 1960), _living("B", 1970)])
        assert exc_info.value.total_records == 2

    def test_empty_input_raises(self) -> None:
        with pytest.raises(EmptyDatasetError):
            compute_summary_stats([])
