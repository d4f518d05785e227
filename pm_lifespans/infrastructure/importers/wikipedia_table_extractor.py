"""Wikipedia data table extractor.

Locates the first ``wikitable`` on the page with BeautifulSoup and lets
pandas turn it into rows (rowspan/colspan expanded), then projects the
name column into RawRecords.

Table structure notes:
    - Rows spanning several terms repeat the name cell once per term after
      rowspan expansion, so identical cells are collapsed.
    - Sub-header rows can surface as data rows whose value is the column
      title itself; those are dropped.
"""

from io import StringIO

import pandas as pd

from bs4 import BeautifulSoup, Tag

from pm_lifespans.common.logging import get_logger
from pm_lifespans.domain.exceptions import ExtractionError
from pm_lifespans.domain.services.officeholder_text_parser import (
    normalize_whitespace,
)
from pm_lifespans.domain.value_objects.officeholder_record import RawRecord
from pm_lifespans.infrastructure.config.settings import DEFAULT_NAME_COLUMN


logger = get_logger(__name__)

DEFAULT_TABLE_CLASS = "wikitable"


def _flatten_column(column: object) -> str:
    """Flatten a (possibly multi-level) header into one normalized label."""
    if isinstance(column, tuple):
        parts: list[str] = []
        for part in column:
            text = normalize_whitespace(str(part))
            if text and not text.startswith("Unnamed:") and text not in parts:
                parts.append(text)
        return " ".join(parts)
    return normalize_whitespace(str(column))


def find_data_table(html: str | bytes, table_class: str = DEFAULT_TABLE_CLASS) -> Tag:
    """Return the first ``<table>`` whose class list contains ``table_class``.

    Raises:
        ExtractionError: no such table
    """
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table", class_=table_class)
    if not isinstance(table, Tag):
        msg = f"No <table class='{table_class}'> found in document"
        raise ExtractionError(msg)
    return table


def label_key(text: str) -> str:
    """Whitespace-insensitive comparison key for headers and cell text.

    ``read_html`` turns ``<br>`` into whitespace, so a configured label of
    ``Name(Birth–Death)Constituency`` must still match the rendered
    ``Name (Birth–Death) Constituency``.
    """
    return "".join(text.split())


def read_table_frame(table: Tag) -> pd.DataFrame:
    """Convert a table element to a DataFrame with flattened column labels."""
    try:
        frames = pd.read_html(StringIO(str(table)))
    except ValueError as e:
        msg = f"Data table could not be read: {e}"
        raise ExtractionError(msg) from e

    frame = frames[0]
    frame.columns = [_flatten_column(c) for c in frame.columns]
    return frame


def extract_raw_records(
    html: str | bytes,
    table_class: str = DEFAULT_TABLE_CLASS,
    name_column: str = DEFAULT_NAME_COLUMN,
) -> list[RawRecord]:
    """Extract the ordered, de-duplicated name-column cells.

    Column lookup and the header-row guard ignore whitespace.

    Args:
        html: Raw page markup
        table_class: CSS class marking the data table
        name_column: Header of the name/birth/death/constituency column

    Returns:
        RawRecords in table order, indexed from 0

    Raises:
        ExtractionError: table or column not found
    """
    table = find_data_table(html, table_class)
    frame = read_table_frame(table)

    wanted_key = label_key(name_column)
    position = next(
        (i for i, label in enumerate(frame.columns) if label_key(label) == wanted_key),
        None,
    )
    if position is None:
        msg = (
            f"Column {normalize_whitespace(name_column)!r} not found; "
            f"available columns: {list(frame.columns)}"
        )
        raise ExtractionError(msg)

    # first match wins when flattening produced duplicate labels
    column = frame.iloc[:, position]

    records: list[RawRecord] = []
    seen: set[str] = set()
    for value in column.dropna():
        text = normalize_whitespace(str(value))
        if not text or label_key(text) == wanted_key:
            continue
        if text in seen:
            continue
        seen.add(text)
        records.append(RawRecord(text=text, index=len(records)))

    logger.info(
        "extracted %d unique records from %d table rows", len(records), len(frame)
    )
    return records
