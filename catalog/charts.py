from __future__ import annotations

from typing import Any, Dict

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def dataset_count_chart(frame: pd.DataFrame) -> alt.Chart:
    """Horizontal bar chart of dataset counts per department, largest first."""
    return (
        alt.Chart(frame)
        .mark_bar()
        .encode(
            x=alt.X("dataset_count:Q", title="Datasets"),
            y=alt.Y("name:N", title="Department", sort="-x"),
            tooltip=["name", alt.Tooltip("dataset_count:Q", format=",")],
        )
    )
