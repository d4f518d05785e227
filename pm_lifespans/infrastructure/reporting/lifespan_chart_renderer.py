"""Horizontal lifespan bar chart rendered with matplotlib."""

from pathlib import Path

import matplotlib


matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from matplotlib.figure import Figure  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from pm_lifespans.common.logging import get_logger  # noqa: E402
from pm_lifespans.domain.value_objects.officeholder_record import (  # noqa: E402
    LifespanSpan,
)


logger = get_logger(__name__)

DECEASED_COLOR = "#4C72B0"
LIVING_COLOR = "#DD8452"


def build_lifespan_figure(
    spans: list[LifespanSpan],
    current_year: int,
    title: str = "Lifespans of Australian Prime Ministers",
) -> Figure:
    """Build the chart: one bar per person, earliest listed at the top."""
    height = max(4.0, 0.3 * len(spans) + 1.5)
    fig, ax = plt.subplots(figsize=(10, height), dpi=100)

    names = [span.name for span in spans]
    positions = list(range(len(spans)))
    colors = [LIVING_COLOR if span.is_living else DECEASED_COLOR for span in spans]
    if spans:
        ax.barh(
            positions,
            [span.end_year - span.start_year for span in spans],
            left=[span.start_year for span in spans],
            color=colors,
            edgecolor="none",
        )
    ax.set_yticks(positions)
    ax.set_yticklabels(names, fontsize=8)
    ax.invert_yaxis()

    ax.axvline(current_year, color="grey", linestyle="--", linewidth=0.8)
    ax.set_xlabel("Year")
    ax.set_title(title)
    ax.grid(axis="x", alpha=0.3)
    ax.legend(
        handles=[
            Patch(color=DECEASED_COLOR, label="Deceased"),
            Patch(color=LIVING_COLOR, label=f"Living (to {current_year})"),
        ],
        loc="lower right",
        fontsize=8,
    )
    fig.tight_layout()
    return fig


def render_lifespan_chart(
    spans: list[LifespanSpan],
    current_year: int,
    output_path: Path,
) -> Path:
    """Render the chart to ``output_path`` (format from the suffix)."""
    fig = build_lifespan_figure(spans, current_year)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, bbox_inches="tight")
    finally:
        plt.close(fig)
    logger.info("chart with %d bars written to %s", len(spans), output_path)
    return output_path
