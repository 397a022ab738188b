"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Per-minute pace, heart rate and elevation summary of a single track.

Samples are grouped into one-minute windows anchored on the first sample's
time. Each window with at least two samples yields one MinuteSummary.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

import pandas as pd
from streamlit.logger import get_logger

from utils.constants import (
    FORMAT_GPX,
    FORMAT_TCX,
    METERS_PER_KM,
    METERS_PER_MILE,
    SECONDS_PER_MINUTE,
    SUPPORTED_SUFFIXES,
)
from utils.distance import segment_distance_m
from utils.gpx_parser import parse_gpx_samples
from utils.tcx_parser import parse_tcx_samples
from utils.track_types import MinuteSummary, Sample, TrackExtraction

logger = get_logger(__name__)

EXTRACTORS: Dict[str, Callable[[bytes], TrackExtraction]] = {
    FORMAT_TCX: parse_tcx_samples,
    FORMAT_GPX: parse_gpx_samples,
}


class UnsupportedTrackFormat(ValueError):
    """Raised for files that are neither .tcx nor .gpx."""


# ------------------------------------------------------------------
# Bucketing
def minute_index(timestamp: pd.Timestamp, start: pd.Timestamp) -> int:
    """Whole minutes elapsed since ``start`` (floored)."""
    elapsed = (timestamp - start).total_seconds()
    return math.floor(elapsed / SECONDS_PER_MINUTE)


def bucket_samples(
    samples: Sequence[Sample], start: Optional[pd.Timestamp] = None
) -> Dict[int, List[Sample]]:
    """Group samples by elapsed-minute index relative to ``start``.

    ``start`` defaults to the first sample's time.
    """
    buckets: Dict[int, List[Sample]] = {}
    if not samples:
        return buckets

    if start is None:
        start = samples[0].timestamp
    for sample in samples:
        index = minute_index(sample.timestamp, start)
        if index < 0:
            logger.warning(
                "Dropping sample at %s recorded before track start %s", sample.timestamp, start
            )
            continue
        buckets.setdefault(index, []).append(sample)
    return buckets


# ------------------------------------------------------------------
# Per-bucket statistics
def pace_seconds(total_time_s: float, total_distance_m: float, unit_m: float) -> float:
    """Seconds needed per ``unit_m`` metres, or 0 when no distance was covered."""
    if total_distance_m <= 0:
        return 0.0
    return total_time_s / (total_distance_m / unit_m)


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def summarize_bucket(
    index: int, samples: Sequence[Sample], from_coordinates: bool
) -> Optional[MinuteSummary]:
    """Compute the summary of one minute bucket.

    Args:
        index: 0-based elapsed-minute index of the bucket
        samples: Samples in the bucket
        from_coordinates: Rebuild distance from lat/lon instead of the cumulative field

    Returns:
        MinuteSummary, or None when the bucket holds fewer than two samples
    """
    if len(samples) < 2:
        return None

    points = sorted(samples, key=lambda s: s.timestamp)

    total_distance = 0.0
    total_time = 0.0
    total_elevation_change = 0.0
    for prev, curr in zip(points, points[1:]):
        total_distance += segment_distance_m(prev, curr, from_coordinates)
        total_time += (curr.timestamp - prev.timestamp).total_seconds()
        # Missing altitude counts as 0 here only; the mean below skips it
        total_elevation_change += (curr.elevation_m or 0.0) - (prev.elevation_m or 0.0)

    elevations = [p.elevation_m for p in points if p.elevation_m is not None]
    heart_rates = [p.heart_rate_bpm for p in points if p.heart_rate_bpm is not None]

    mean_elevation = _mean(elevations)
    grade = None
    if total_distance > 0:
        grade = round((total_elevation_change / total_distance) * 100, 1)

    return MinuteSummary(
        minute_number=index + 1,
        pace_seconds_per_km=pace_seconds(total_time, total_distance, METERS_PER_KM),
        pace_seconds_per_mile=pace_seconds(total_time, total_distance, METERS_PER_MILE),
        heart_rate_bpm=_mean(heart_rates),
        elevation_m=round(mean_elevation, 1) if mean_elevation is not None else None,
        grade_percent=grade,
        distance_m=total_distance,
        duration_s=total_time,
    )


def build_minute_summary(extraction: TrackExtraction) -> List[MinuteSummary]:
    """Summaries for every bucket with at least two samples, ascending by minute."""
    if extraction.is_empty:
        logger.info("No track points in %s track", extraction.source_format or "unknown")
        return []

    buckets = bucket_samples(extraction.samples, start=extraction.start_time)
    summary: List[MinuteSummary] = []
    for index in sorted(buckets):
        row = summarize_bucket(
            index, buckets[index], extraction.compute_distance_from_coordinates
        )
        if row is not None:
            summary.append(row)

    logger.debug(
        "Built %d minute rows from %d buckets (%s)",
        len(summary),
        len(buckets),
        extraction.source_format or "unknown format",
    )
    return summary


# ------------------------------------------------------------------
# Entry points
def detect_format(path: Union[str, Path]) -> str:
    """Map a file suffix to a track format.

    Raises:
        UnsupportedTrackFormat: for any suffix other than .tcx or .gpx
    """
    suffix = Path(path).suffix.lower()
    fmt = SUPPORTED_SUFFIXES.get(suffix)
    if fmt is None:
        raise UnsupportedTrackFormat(f"Unsupported file type: {suffix or Path(path).name}")
    return fmt


def extract_track(data: bytes, fmt: str) -> TrackExtraction:
    extractor = EXTRACTORS.get(fmt)
    if extractor is None:
        raise UnsupportedTrackFormat(f"Unsupported file type: {fmt}")
    return extractor(data)


def summarize_track(data: bytes, fmt: str) -> List[MinuteSummary]:
    """Extract samples from raw document bytes and summarize them per minute."""
    return build_minute_summary(extract_track(data, fmt))


def summarize_file(path: Union[str, Path]) -> List[MinuteSummary]:
    """Summarize a .tcx or .gpx file on disk.

    Raises:
        UnsupportedTrackFormat: for unsupported suffixes (checked before reading)
        TrackParseError: for invalid XML or track point times
    """
    fmt = detect_format(path)
    data = Path(path).read_bytes()
    logger.info("Summarizing %s (%s, %d bytes)", Path(path).name, fmt, len(data))
    return summarize_track(data, fmt)
