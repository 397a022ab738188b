"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Tabular rendering of minute summaries for the CLI and the Streamlit page.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd

from utils.constants import (
    BASE_COLUMNS,
    COLUMN_ELEVATION,
    COLUMN_GRADE,
    COLUMN_HR,
    COLUMN_MINUTE,
    COLUMN_PACE_KM,
    COLUMN_PACE_MILE,
    LAYOUT_FULL,
    LAYOUT_PLAIN,
    TABLE_LAYOUTS,
    TABLE_TITLE,
)
from utils.formatting import fmt_bpm, fmt_elevation, fmt_grade, format_pace
from utils.track_types import MinuteSummary


def summary_columns(include_grade: bool) -> List[str]:
    return BASE_COLUMNS + [COLUMN_GRADE] if include_grade else list(BASE_COLUMNS)


def summaries_to_frame(summaries: Sequence[MinuteSummary], include_grade: bool = True) -> pd.DataFrame:
    """Build a display DataFrame, one formatted row per minute."""
    columns = summary_columns(include_grade)
    rows: List[Dict[str, object]] = []
    for row in summaries:
        record: Dict[str, object] = {
            COLUMN_MINUTE: row.minute_number,
            COLUMN_PACE_KM: format_pace(row.pace_seconds_per_km),
            COLUMN_PACE_MILE: format_pace(row.pace_seconds_per_mile),
            COLUMN_HR: fmt_bpm(row.heart_rate_bpm),
            COLUMN_ELEVATION: fmt_elevation(row.elevation_m),
        }
        if include_grade:
            record[COLUMN_GRADE] = fmt_grade(row.grade_percent)
        rows.append(record)

    if not rows:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame(rows)
    return df[columns]


def render_summary_table(summaries: Sequence[MinuteSummary], layout: str = LAYOUT_FULL) -> str:
    """Render summaries as text.

    ``full`` adds a title, rule lines and the grade column; ``plain`` prints the
    bare columns without grade.
    """
    if layout not in TABLE_LAYOUTS:
        raise ValueError(f"Unknown table layout {layout!r}; expected one of {TABLE_LAYOUTS}")

    df = summaries_to_frame(summaries, include_grade=layout == LAYOUT_FULL)
    if df.empty:
        body = "  ".join(df.columns)
    else:
        body = df.to_string(index=False)

    if layout == LAYOUT_PLAIN:
        return body

    width = max(len(TABLE_TITLE), *(len(line) for line in body.splitlines()))
    rule = "-" * width
    return "\n".join([rule, TABLE_TITLE.center(width).rstrip(), rule, body, rule])
