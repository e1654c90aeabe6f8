import logging
import streamlit as st
from floodwatch import data, ui
from floodwatch.exceptions import EmptyResult, FloodWatchError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("floodwatch.app")

# --- PAGE SETUP ---
st.set_page_config(page_title="FloodWatch", layout="centered", page_icon="🌊")
ui.apply_custom_css()
ui.render_header()

# --- STATIONS ---
try:
    stations = data.fetch_stations()
except FloodWatchError as e:
    logger.error(f"Station list unavailable: {e}")
    st.error("Failed to load the station list. Please refresh to try again.")
    st.stop()

station_id = ui.render_station_selector(stations)

# --- READINGS ---
if station_id:
    with st.container(border=True):
        st.subheader("Water Level Readings")
        st.caption("Last 24 hours of water level data for the selected station")

        try:
            with st.spinner("Loading readings..."):
                readings = data.load_readings(station_id)
        except EmptyResult:
            ui.render_status("No data available for this station")
        except FloodWatchError as e:
            logger.error(f"Error fetching readings: {e}")
            ui.render_status("Failed to load station readings. Please try again.", error=True)
        else:
            points, has_stage, has_downstream = data.transform(readings)

            tab_chart, tab_table = st.tabs(["📈 Chart", "📋 Table"])
            with tab_chart:
                ui.render_readings_chart(points, has_stage, has_downstream)
            with tab_table:
                ui.render_readings_table(points, has_stage, has_downstream)
