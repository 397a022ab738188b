"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

# ==============================================================================
# UNITS
# ==============================================================================

METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.34
SECONDS_PER_MINUTE = 60

# Mean Earth radius used by the spherical (haversine) distance model
EARTH_RADIUS_M = 6_371_000.0

# ==============================================================================
# TRACK FORMATS
# ==============================================================================

FORMAT_TCX = "tcx"
FORMAT_GPX = "gpx"
SUPPORTED_SUFFIXES = {".tcx": FORMAT_TCX, ".gpx": FORMAT_GPX}

# ==============================================================================
# SUMMARY TABLE DISPLAY
# ==============================================================================

LAYOUT_FULL = "full"
LAYOUT_PLAIN = "plain"
TABLE_LAYOUTS = (LAYOUT_FULL, LAYOUT_PLAIN)
DEFAULT_TABLE_LAYOUT = LAYOUT_FULL
DEFAULT_LOCALE = "en_US"

TABLE_TITLE = "Workout Summary"
PACE_PLACEHOLDER = "-"

COLUMN_MINUTE = "Minute"
COLUMN_PACE_KM = "Pace (km)"
COLUMN_PACE_MILE = "Pace (mile)"
COLUMN_HR = "HR"
COLUMN_ELEVATION = "Elev (m)"
COLUMN_GRADE = "Grade (%)"

BASE_COLUMNS = [COLUMN_MINUTE, COLUMN_PACE_KM, COLUMN_PACE_MILE, COLUMN_HR, COLUMN_ELEVATION]
