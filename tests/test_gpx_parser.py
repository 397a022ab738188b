"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Tests for GPX track extraction.
"""

from __future__ import annotations

import pandas as pd
import pytest

from builders import START, build_gpx
from utils.gpx_parser import parse_gpx_samples
from utils.track_xml import TrackParseError


def test_parse_gpx_extracts_samples(gpx_bytes):
    result = parse_gpx_samples(gpx_bytes)
    assert result.compute_distance_from_coordinates is True
    assert result.source_format == "gpx"
    assert len(result.samples) == 3

    first = result.samples[0]
    assert first.timestamp == START
    assert first.latitude == pytest.approx(45.0)
    assert first.longitude == pytest.approx(5.0)
    assert first.elevation_m == pytest.approx(100.0)
    assert first.heart_rate_bpm == 140
    assert first.cumulative_distance_m is None
    assert result.start_time == START


def test_parse_gpx_missing_optional_fields_are_absent():
    gpx = build_gpx([(0, 45.0, 5.0, None, None), (10, 45.0, 5.0001, 0.0, None)])
    result = parse_gpx_samples(gpx)
    assert result.samples[0].elevation_m is None
    assert result.samples[0].heart_rate_bpm is None
    # A zero reading is kept as a reading
    assert result.samples[1].elevation_m == 0.0


def test_parse_gpx_without_namespace():
    gpx = b"""<gpx><trk><trkseg>
      <trkpt lat="1.0" lon="2.0"><time>2024-05-01T07:00:00Z</time><hr>120</hr></trkpt>
    </trkseg></trk></gpx>"""
    result = parse_gpx_samples(gpx)
    assert len(result.samples) == 1
    assert result.samples[0].heart_rate_bpm == 120


def test_parse_gpx_no_track_points_is_empty():
    gpx = b"""<?xml version="1.0"?><gpx xmlns="http://www.topografix.com/GPX/1/1"><trk/></gpx>"""
    result = parse_gpx_samples(gpx)
    assert result.is_empty
    assert result.start_time is None
    assert result.compute_distance_from_coordinates is True


def test_parse_gpx_timestamps_are_utc():
    gpx = b"""<gpx><trk><trkseg>
      <trkpt lat="1.0" lon="2.0"><time>2024-05-01T09:00:00+02:00</time></trkpt>
    </trkseg></trk></gpx>"""
    result = parse_gpx_samples(gpx)
    assert result.samples[0].timestamp == pd.Timestamp("2024-05-01T07:00:00Z")


@pytest.mark.parametrize("raw_time", ["not a time", "now", "today"])
def test_parse_gpx_malformed_time_is_fatal(raw_time):
    gpx = (
        "<gpx><trk><trkseg>"
        '<trkpt lat="1.0" lon="2.0"><time>2024-05-01T07:00:00Z</time></trkpt>'
        f'<trkpt lat="1.0" lon="2.1"><time>{raw_time}</time></trkpt>'
        "</trkseg></trk></gpx>"
    ).encode()
    with pytest.raises(TrackParseError, match="Track point 1"):
        parse_gpx_samples(gpx)


def test_parse_gpx_missing_time_is_fatal():
    gpx = b"""<gpx><trk><trkseg><trkpt lat="1.0" lon="2.0"><ele>5</ele></trkpt></trkseg></trk></gpx>"""
    with pytest.raises(TrackParseError):
        parse_gpx_samples(gpx)


def test_parse_gpx_bad_input():
    with pytest.raises(TrackParseError):
        parse_gpx_samples(b"<gpx><trk>")
