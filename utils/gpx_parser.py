"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

GPX track extractor.

GPX carries no running distance, so the aggregator rebuilds it from
consecutive lat/lon pairs.
"""

from __future__ import annotations

from typing import List

from streamlit.logger import get_logger

from utils.constants import FORMAT_GPX
from utils.track_types import Sample, TrackExtraction
from utils.track_xml import (
    element_text,
    load_root,
    optional_attribute_float,
    optional_float,
    optional_int,
    parse_timestamp,
)

logger = get_logger(__name__)


def parse_gpx_samples(gpx_bytes: bytes) -> TrackExtraction:
    """Parse GPX track points into samples.

    Extracts every ``trkpt`` with its lat/lon attributes, ``time``, optional
    ``ele`` and optional heart rate. Heart rate lives in device extensions
    (e.g. ``gpxtpx:TrackPointExtension/gpxtpx:hr``), so it is searched at any depth.

    Args:
        gpx_bytes: Raw GPX file content as bytes

    Returns:
        TrackExtraction flagged for geodesic distance; empty if no track points

    Raises:
        TrackParseError: on invalid XML or a missing/malformed point time
    """
    root = load_root(gpx_bytes)

    trkpts = root.findall(".//trkpt")
    if not trkpts:
        logger.debug("No track points found in GPX")
        return TrackExtraction(compute_distance_from_coordinates=True, source_format=FORMAT_GPX)

    samples: List[Sample] = []
    for index, trkpt in enumerate(trkpts):
        samples.append(
            Sample(
                timestamp=parse_timestamp(element_text(trkpt, ".//time"), index),
                latitude=optional_attribute_float(trkpt, "lat"),
                longitude=optional_attribute_float(trkpt, "lon"),
                elevation_m=optional_float(trkpt, ".//ele"),
                heart_rate_bpm=optional_int(trkpt, ".//hr"),
            )
        )

    logger.info("Parsed GPX: %d track points", len(samples))
    return TrackExtraction(
        samples=samples,
        compute_distance_from_coordinates=True,
        source_format=FORMAT_GPX,
    )
