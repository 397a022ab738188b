"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

import pytest

from utils.summary_table import render_summary_table, summaries_to_frame
from utils.track_types import MinuteSummary


@pytest.fixture
def rows():
    return [
        MinuteSummary(
            minute_number=1,
            pace_seconds_per_km=357.14,
            pace_seconds_per_mile=574.76,
            heart_rate_bpm=155.0,
            elevation_m=15.0,
            grade_percent=7.1,
        ),
        MinuteSummary(
            minute_number=3,
            pace_seconds_per_km=0,
            pace_seconds_per_mile=0,
            heart_rate_bpm=None,
            elevation_m=None,
            grade_percent=None,
        ),
    ]


def test_frame_with_grade(rows):
    df = summaries_to_frame(rows, include_grade=True)
    assert list(df.columns) == ["Minute", "Pace (km)", "Pace (mile)", "HR", "Elev (m)", "Grade (%)"]
    assert list(df["Minute"]) == [1, 3]
    assert df.iloc[0]["Pace (km)"] == "5:57"
    assert df.iloc[0]["Pace (mile)"] == "9:35"
    assert df.iloc[0]["HR"] == "155"
    assert df.iloc[0]["Grade (%)"] == "7.1"
    assert df.iloc[1]["Pace (km)"] == "-"
    assert df.iloc[1]["HR"] == ""
    assert df.iloc[1]["Grade (%)"] == ""


def test_frame_without_grade(rows):
    df = summaries_to_frame(rows, include_grade=False)
    assert "Grade (%)" not in df.columns


def test_full_layout_has_title_and_grade(rows):
    text = render_summary_table(rows, layout="full")
    assert "Workout Summary" in text
    assert "Grade (%)" in text
    assert "5:57" in text


def test_plain_layout_omits_grade(rows):
    text = render_summary_table(rows, layout="plain")
    assert "Workout Summary" not in text
    assert "Grade (%)" not in text
    assert text.splitlines()[0].split()[0] == "Minute"


def test_empty_summary_renders_headers_only():
    text = render_summary_table([], layout="full")
    assert "Minute" in text
    assert "Empty DataFrame" not in text
    assert summaries_to_frame([]).empty


def test_unknown_layout_rejected(rows):
    with pytest.raises(ValueError):
        render_summary_table(rows, layout="fancy")
