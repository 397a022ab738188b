"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Data contracts shared by the track extractors and the minute aggregator.

Optional readings use ``None`` for "not recorded". A zero is a real reading and
is never used as a placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd


@dataclass(frozen=True)
class Sample:
    """One recorded instant along the track."""

    timestamp: pd.Timestamp
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    cumulative_distance_m: Optional[float] = None
    elevation_m: Optional[float] = None
    heart_rate_bpm: Optional[int] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass
class TrackExtraction:
    """Samples pulled out of one document plus how distance must be rebuilt."""

    samples: List[Sample] = field(default_factory=list)
    compute_distance_from_coordinates: bool = False
    source_format: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.samples

    @property
    def start_time(self) -> Optional[pd.Timestamp]:
        if not self.samples:
            return None
        return self.samples[0].timestamp


@dataclass(frozen=True)
class MinuteSummary:
    """Aggregated metrics for one retained minute bucket."""

    minute_number: int
    pace_seconds_per_km: float
    pace_seconds_per_mile: float
    heart_rate_bpm: Optional[float]
    elevation_m: Optional[float]
    grade_percent: Optional[float]
    distance_m: float = 0.0
    duration_s: float = 0.0

    def to_record(self) -> Dict[str, object]:
        return {
            "minute": self.minute_number,
            "paceSecPerKm": self.pace_seconds_per_km,
            "paceSecPerMile": self.pace_seconds_per_mile,
            "heartRateBpm": self.heart_rate_bpm,
            "elevationM": self.elevation_m,
            "gradePercent": self.grade_percent,
            "distanceM": self.distance_m,
            "durationSec": self.duration_s,
        }
