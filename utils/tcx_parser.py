"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

TCX (Training Center XML) track extractor.

Distance comes from the device's cumulative ``DistanceMeters`` field; no
geodesic estimation is done for TCX.
"""

from __future__ import annotations

from typing import List

from streamlit.logger import get_logger

from utils.constants import FORMAT_TCX
from utils.track_types import Sample, TrackExtraction
from utils.track_xml import element_text, load_root, optional_float, optional_int, parse_timestamp

logger = get_logger(__name__)


def parse_tcx_samples(tcx_bytes: bytes) -> TrackExtraction:
    """Parse TCX ``Trackpoint`` elements into samples.

    Args:
        tcx_bytes: Raw TCX file content as bytes

    Returns:
        TrackExtraction using the cumulative distance field; empty if no track points

    Raises:
        TrackParseError: on invalid XML or a missing/malformed point time
    """
    root = load_root(tcx_bytes)

    trackpoints = root.findall(".//Trackpoint")
    if not trackpoints:
        logger.debug("No track points found in TCX")
        return TrackExtraction(compute_distance_from_coordinates=False, source_format=FORMAT_TCX)

    samples: List[Sample] = []
    for index, trackpoint in enumerate(trackpoints):
        samples.append(
            Sample(
                timestamp=parse_timestamp(element_text(trackpoint, "Time"), index),
                cumulative_distance_m=optional_float(trackpoint, "DistanceMeters"),
                elevation_m=optional_float(trackpoint, "AltitudeMeters"),
                # Heart rate is wrapped one level deeper than the other fields
                heart_rate_bpm=optional_int(trackpoint, "HeartRateBpm/Value"),
            )
        )

    logger.info("Parsed TCX: %d track points", len(samples))
    return TrackExtraction(
        samples=samples,
        compute_distance_from_coordinates=False,
        source_format=FORMAT_TCX,
    )
