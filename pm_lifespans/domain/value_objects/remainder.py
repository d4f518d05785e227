"""Classified parenthetical fragment of an office-holder cell."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DateRange:
    """``(YYYY–YYYY)``: birth and death year."""

    birth_year: int
    death_year: int


@dataclass(frozen=True)
class BornOnly:
    """``(b. YYYY)``: birth year of a living person."""

    birth_year: int


@dataclass(frozen=True)
class Unrecognized:
    """Neither a year range nor a born token was found."""

    text: str


Remainder = DateRange | BornOnly | Unrecognized
