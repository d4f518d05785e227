"""Tabular presentation of lifespan records and summary statistics."""

import pandas as pd

from pm_lifespans.domain.value_objects.officeholder_record import (
    DerivedRecord,
    SummaryStats,
)


RECORD_COLUMNS = ["Name", "Birth Year", "Death Year", "Age at Death"]
SUMMARY_COLUMNS = ["Metric", "Name", "Age"]
AVERAGE_NAME_PLACEHOLDER = "-"


class LifespanPresenter:
    """Converts analysis results into DataFrames for display and export."""

    def records_to_dataframe(self, records: list[DerivedRecord]) -> pd.DataFrame:
        """Records table; death year and age are blank for the living."""
        if not records:
            return pd.DataFrame(columns=RECORD_COLUMNS)

        df_data = []
        for record in records:
            df_data.append(
                {
                    "Name": record.name,
                    "Birth Year": record.birth_year,
                    "Death Year": record.death_year
                    if record.death_year is not None
                    else "",
                    "Age at Death": record.age_at_death
                    if record.age_at_death is not None
                    else "",
                }
            )
        return pd.DataFrame(df_data, columns=RECORD_COLUMNS)

    def summary_to_dataframe(self, summary: SummaryStats) -> pd.DataFrame:
        """Fixed three-row summary table."""
        return pd.DataFrame(
            [
                {
                    "Metric": "Minimum Age",
                    "Name": summary.min_age_name,
                    "Age": summary.min_age,
                },
                {
                    "Metric": "Maximum Age",
                    "Name": summary.max_age_name,
                    "Age": summary.max_age,
                },
                {
                    "Metric": "Average Age",
                    "Name": AVERAGE_NAME_PLACEHOLDER,
                    "Age": summary.average_age,
                },
            ],
            columns=SUMMARY_COLUMNS,
        )

    def to_text(self, frame: pd.DataFrame) -> str:
        """Plain-text table for terminal output."""
        if frame.empty:
            return "(no rows)"
        return frame.to_string(index=False)
