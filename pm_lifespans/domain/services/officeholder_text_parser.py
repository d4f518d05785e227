"""Office-holder cell parser.

Splits a name-column cell into the name and its parenthetical fragment and
extracts the life years. Supported fragments:
- "(1849–1920)" (birth and death year, EN DASH separated)
- "(b. 1963)" (birth year of a living person)

Trailing constituency text after the closing parenthesis is ignored.
"""

import re

from pm_lifespans.common.logging import get_logger
from pm_lifespans.domain.exceptions import ParseError
from pm_lifespans.domain.value_objects.officeholder_record import ParsedRecord
from pm_lifespans.domain.value_objects.remainder import (
    BornOnly,
    DateRange,
    Remainder,
    Unrecognized,
)


logger = get_logger(__name__)

# U+2013 EN DASH, as used by the source table. An ASCII hyphen does not match.
YEAR_RANGE_DASH = "–"

_YEAR_RANGE_PATTERN = re.compile(rf"(\d{{4}}){YEAR_RANGE_DASH}(\d{{4}})")
_BORN_PATTERN = re.compile(r"b\. (\d{4})")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs (newlines and NBSP included) to one space."""
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def split_name(text: str) -> tuple[str, str]:
    """Split a cell on its first opening parenthesis.

    Returns:
        (name, remainder), with the name trimmed

    Raises:
        ParseError: no parenthesis or nothing before it
    """
    name, sep, remainder = text.partition("(")
    if not sep:
        raise ParseError("no opening parenthesis", text)
    name = name.strip()
    if not name:
        raise ParseError("empty name", text, remainder=remainder)
    return name, remainder


def classify_remainder(remainder: str) -> Remainder:
    """Classify the text after the first parenthesis.

    A year range wins over a born token when both are present.
    """
    range_match = _YEAR_RANGE_PATTERN.search(remainder)
    born_match = _BORN_PATTERN.search(remainder)

    if range_match:
        if born_match:
            logger.debug("both year range and born token in %r", remainder)
        return DateRange(
            birth_year=int(range_match.group(1)),
            death_year=int(range_match.group(2)),
        )
    if born_match:
        return BornOnly(birth_year=int(born_match.group(1)))
    return Unrecognized(text=remainder)


def parse_officeholder_text(text: str, index: int | None = None) -> ParsedRecord:
    """Parse one normalized name-column cell.

    Args:
        text: Cell text, e.g. "Edmund Barton(1849–1920)Division of Hunter"
        index: Position of the record, reported in errors

    Returns:
        ParsedRecord

    Raises:
        ParseError: the cell matches neither supported format
    """
    try:
        name, remainder = split_name(text)
    except ParseError as e:
        raise ParseError(
            e.reason, text, index=index, remainder=e.remainder
        ) from None

    classified = classify_remainder(remainder)
    if isinstance(classified, DateRange):
        if classified.death_year < classified.birth_year:
            raise ParseError(
                "death year precedes birth year",
                text,
                index=index,
                name=name,
                remainder=remainder,
            )
        return ParsedRecord(
            name=name,
            birth_year=classified.birth_year,
            death_year=classified.death_year,
        )
    if isinstance(classified, BornOnly):
        return ParsedRecord(name=name, birth_year=classified.birth_year)

    raise ParseError(
        "no year range or born token",
        text,
        index=index,
        name=name,
        remainder=remainder,
    )
