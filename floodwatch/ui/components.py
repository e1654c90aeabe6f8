import streamlit as st
import pandas as pd
import altair as alt
from typing import List, Optional
from .. import config
from ..models import SeriesPoint, Station
from ..data import to_frame, to_table

def render_header():
    st.title("Welcome to FloodWatch")

def render_status(message: str, error: bool = False):
    cls = "status-message error" if error else "status-message"
    st.markdown(f"<div class='{cls}'>{message}</div>", unsafe_allow_html=True)

def render_station_selector(stations: List[Station]) -> Optional[str]:
    """Dropdown of stations; returns the selected station URI or None."""
    if not stations:
        st.selectbox("Select a measurement station", ["No stations available"], disabled=True)
        return None

    names = {s.id: s.display_name for s in stations}
    return st.selectbox(
        "Select a measurement station",
        options=list(names),
        index=None,
        placeholder="Select a station",
        format_func=lambda sid: names.get(sid, sid),
    )

def render_readings_chart(points: List[SeriesPoint], has_stage: bool, has_downstream: bool):
    """Line chart with one line per series that has data."""
    df = to_frame(points)
    if df.empty:
        render_status("No data available for this station")
        return

    domain, colors = [], []
    for present, field in ((has_stage, 'stage'), (has_downstream, 'downstream')):
        if present:
            domain.append(config.SERIES_LABELS[field])
            colors.append(config.THEME_COLORS[field])

    chart = alt.Chart(df).mark_line(point=alt.OverlayMarkDef(size=20), strokeWidth=2).encode(
        x=alt.X('dateTime:T', title="Time", axis=alt.Axis(format="%H:%M")),
        y=alt.Y('value:Q', title="Water Level (m)", scale=alt.Scale(zero=False)),
        color=alt.Color('series:N', title=None, scale=alt.Scale(domain=domain, range=colors),
                        legend=alt.Legend(orient='bottom')),
        tooltip=['time', 'series', alt.Tooltip('value:Q', format='.3f')]
    ).properties(height=400)

    st.altair_chart(chart.interactive(), width='stretch')

def render_readings_table(points: List[SeriesPoint], has_stage: bool, has_downstream: bool):
    """Hourly table built from every 4th point."""
    df: pd.DataFrame = to_table(points, has_stage, has_downstream)
    if df.empty:
        render_status("No data available for this station")
        return
    st.dataframe(df, width='stretch', hide_index=True)
    st.caption("Hourly water level readings (m)")
