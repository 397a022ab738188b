"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Shared lxml helpers for the TCX and GPX track extractors.
"""

from __future__ import annotations

import math
from typing import Optional

import pandas as pd
from lxml import etree
from streamlit.logger import get_logger

logger = get_logger(__name__)


class TrackParseError(ValueError):
    """Raised when a track document cannot be turned into samples."""


def load_root(xml_bytes: bytes) -> etree._Element:
    """Parse XML bytes and return the root with namespaces removed.

    Both TCX and GPX documents declare default namespaces (and devices add their
    own extension namespaces), so elements are matched by local name only.

    Raises:
        TrackParseError: if the document is not well-formed XML
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)
    try:
        root = etree.fromstring(xml_bytes, parser=parser)
    except etree.XMLSyntaxError as e:
        raise TrackParseError(f"Invalid track XML: {e}") from e
    if root is None:
        raise TrackParseError("Empty track document")

    for element in root.iter():
        # Comments and processing instructions have non-string tags
        if isinstance(element.tag, str):
            element.tag = etree.QName(element).localname
    etree.cleanup_namespaces(root)
    return root


def parse_timestamp(text: Optional[str], index: int) -> pd.Timestamp:
    """Parse an ISO-8601 track point time into a UTC timestamp.

    Only ISO-8601 text is accepted; relative words such as "now" are rejected.

    Args:
        text: Raw element text (may be None when the element is missing)
        index: Position of the track point, used in the error message

    Raises:
        TrackParseError: if the time is missing or malformed
    """
    if text is None or not text.strip():
        raise TrackParseError(f"Track point {index} has no time")
    try:
        timestamp = pd.to_datetime(text.strip(), utc=True, format="ISO8601")
    except (ValueError, TypeError) as e:
        raise TrackParseError(f"Track point {index} has an invalid time {text.strip()!r}") from e
    if pd.isna(timestamp):
        raise TrackParseError(f"Track point {index} has an invalid time {text.strip()!r}")
    return timestamp


def element_text(node: etree._Element, path: str) -> Optional[str]:
    """Return stripped text of the first element matching ``path`` or None."""
    found = node.find(path)
    if found is None or found.text is None:
        return None
    text = found.text.strip()
    return text or None


def optional_float(node: etree._Element, path: str) -> Optional[float]:
    text = element_text(node, path)
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        logger.debug("Ignoring non-numeric %s value: %r", path, text)
        return None
    return value if math.isfinite(value) else None


def optional_int(node: etree._Element, path: str) -> Optional[int]:
    value = optional_float(node, path)
    if value is None:
        return None
    return int(value)


def optional_attribute_float(node: etree._Element, name: str) -> Optional[float]:
    raw = node.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.debug("Ignoring non-numeric %s attribute: %r", name, raw)
        return None
    return value if math.isfinite(value) else None
