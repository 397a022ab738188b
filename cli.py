"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Command line entry point: print the per-minute summary of one track file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from streamlit.logger import get_logger, set_log_level

from services.minute_summary_service import UnsupportedTrackFormat, summarize_file
from utils.config import load_config
from utils.constants import TABLE_LAYOUTS
from utils.formatting import set_locale
from utils.summary_table import render_summary_table
from utils.track_xml import TrackParseError

logger = get_logger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Per-minute pace, heart rate and elevation summary of a .tcx or .gpx track.",
)


@app.command()
def summary(
    track_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Input .tcx or .gpx file"
    ),
    layout: Optional[str] = typer.Option(
        None,
        "--layout",
        "-l",
        help="Table layout: full (with grade) | plain. Defaults to WORKOUT_TABLE_LAYOUT.",
    ),
    locale: Optional[str] = typer.Option(
        None, "--locale", help="Number locale for the table. Defaults to WORKOUT_LOCALE."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    cfg = load_config()
    set_log_level("debug" if verbose else cfg.log_level)

    table_layout = (layout or cfg.table_layout).lower()
    if table_layout not in TABLE_LAYOUTS:
        typer.echo(f"Unknown layout {layout!r}; expected one of: {', '.join(TABLE_LAYOUTS)}", err=True)
        raise typer.Exit(code=1)
    set_locale(locale or cfg.locale)

    try:
        rows = summarize_file(track_file)
    except UnsupportedTrackFormat:
        typer.echo("Unsupported file type", err=True)
        raise typer.Exit(code=1)
    except TrackParseError as e:
        logger.debug("Parse failure for %s", track_file, exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render_summary_table(rows, layout=table_layout))


def main_cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main_cli()
