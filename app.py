import streamlit as st
from streamlit.logger import get_logger

from services.minute_summary_service import UnsupportedTrackFormat, detect_format, summarize_track
from utils.config import load_config
from utils.constants import TABLE_TITLE
from utils.formatting import set_locale
from utils.summary_table import summaries_to_frame
from utils.track_xml import TrackParseError

logger = get_logger(__name__)


def main():
    st.set_page_config(page_title=TABLE_TITLE, layout="wide")
    cfg = load_config()
    set_locale(cfg.locale)
    st.session_state.setdefault("app_config", cfg)
    st.title(TABLE_TITLE)
    st.caption("Upload a .tcx or .gpx recording to see pace, heart rate and elevation minute by minute.")

    uploaded = st.file_uploader("Track file", type=["tcx", "gpx"])
    show_grade = st.toggle("Show grade (%)", value=cfg.show_grade)
    if uploaded is None:
        return

    try:
        fmt = detect_format(uploaded.name)
        rows = summarize_track(uploaded.getvalue(), fmt)
    except (UnsupportedTrackFormat, TrackParseError) as e:
        logger.warning("Could not summarize %s: %s", uploaded.name, e)
        st.error(str(e))
        return

    if not rows:
        st.info("No minute with at least two track points.")
    st.dataframe(summaries_to_frame(rows, include_grade=show_grade), hide_index=True)


if __name__ == "__main__":
    main()
