from .styles import apply_custom_css
from .components import (
    render_header,
    render_station_selector,
    render_readings_chart,
    render_readings_table,
    render_status,
)
