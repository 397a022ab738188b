"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from services.minute_summary_service import build_minute_summary, summarize_file, summarize_track

__all__ = ["build_minute_summary", "summarize_file", "summarize_track"]
