"""Domain exceptions for the lifespan analysis pipeline."""


class LifespanAnalysisError(Exception):
    """Base class for every error raised by the pipeline."""


class FetchError(LifespanAnalysisError):
    """The source document could not be retrieved."""

    def __init__(
        self, message: str, url: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ExtractionError(LifespanAnalysisError):
    """The data table or its designated column was not found."""


class ParseError(LifespanAnalysisError):
    """A single table cell matched neither recognised format.

    Carries the offending text and its position so the failure can be
    diagnosed without re-running.
    """

    def __init__(
        self,
        reason: str,
        text: str,
        index: int | None = None,
        name: str | None = None,
        remainder: str | None = None,
    ) -> None:
        self.reason = reason
        self.text = text
        self.index = index
        self.name = name
        self.remainder = remainder
        super().__init__(self._format())

    def _format(self) -> str:
        location = f"record {self.index}" if self.index is not None else "record"
        message = f"{location}: {self.reason}: {self.text!r}"
        details = []
        if self.name is not None:
            details.append(f"name={self.name!r}")
        if self.remainder is not None:
            details.append(f"remainder={self.remainder!r}")
        if details:
            message += f" ({', '.join(details)})"
        return message


class InvalidCurrentYearError(LifespanAnalysisError, ValueError):
    """The reference year for living spans precedes a living person's birth."""

    def __init__(self, current_year: int, birth_year: int, name: str) -> None:
        super().__init__(
            f"current_year({current_year}) precedes birth year {birth_year} of {name}"
        )
        self.current_year = current_year
        self.birth_year = birth_year
        self.name = name


class EmptyDatasetError(LifespanAnalysisError):
    """No deceased records exist, so summary statistics are undefined."""

    def __init__(self, total_records: int = 0) -> None:
        super().__init__(
            f"No deceased records to summarise ({total_records} records in total)"
        )
        self.total_records = total_records
