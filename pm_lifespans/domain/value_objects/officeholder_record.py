"""Office-holder record value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawRecord:
    """Normalized, de-duplicated text of one table row's name column."""

    text: str
    index: int


@dataclass(frozen=True)
class ParsedRecord:
    """Name and life years extracted from a RawRecord.

    ``death_year`` is None when the person is recorded as living.
    """

    name: str
    birth_year: int
    death_year: int | None = None

    def __post_init__(self) -> None:
        if self.death_year is not None and self.death_year < self.birth_year:
            msg = (
                f"death_year({self.death_year}) must not precede "
                f"birth_year({self.birth_year}) for {self.name}"
            )
            raise ValueError(msg)

    @property
    def is_living(self) -> bool:
        return self.death_year is None


@dataclass(frozen=True)
class DerivedRecord(ParsedRecord):
    """ParsedRecord plus age at death (None for the living)."""

    age_at_death: int | None = None

    @classmethod
    def from_parsed(cls, record: ParsedRecord) -> "DerivedRecord":
        age = None
        if record.death_year is not None:
            age = record.death_year - record.birth_year
        return cls(
            name=record.name,
            birth_year=record.birth_year,
            death_year=record.death_year,
            age_at_death=age,
        )


@dataclass(frozen=True)
class LifespanSpan:
    """Horizontal chart span from birth to death (or the current year)."""

    name: str
    start_year: int
    end_year: int
    is_living: bool


@dataclass(frozen=True)
class SummaryStats:
    """Minimum, maximum and average age at death over the deceased."""

    min_age: int
    min_age_name: str
    max_age: int
    max_age_name: str
    average_age: int
    min_age_names: tuple[str, ...] = ()
    max_age_names: tuple[str, ...] = ()
    sample_size: int = 0
