from .fetchers import fetch_stations_raw, fetch_station_readings_raw, station_reference
from .processing import (
    fetch_stations,
    fetch_readings,
    load_readings,
    parse_readings,
    parse_stations,
    transform,
    sample,
    to_frame,
    to_table,
)
