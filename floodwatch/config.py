"""
Configuration module for the FloodWatch dashboard.
Centralizes API endpoints, limits, cache settings, and styling parameters.
"""

# --- API ENDPOINTS ---
FLOOD_API_BASE_URL = "https://environment.data.gov.uk/flood-monitoring"
FLOOD_STATIONS_URL = f"{FLOOD_API_BASE_URL}/id/stations"

# Station specific readings, {station} is the short station reference
STATION_READINGS_URL = FLOOD_STATIONS_URL + "/{station}/readings"

STATIONS_LIMIT = 100
READINGS_LIMIT = 100  # ~24h at 15 minute intervals

REQUEST_TIMEOUT = 15  # seconds

# --- CACHING ---
DEFAULT_CACHE_TTL_STATIONS = 3600  # 1 hour, readings are never cached
NO_CACHE_HEADER = "no-store, max-age=0, must-revalidate"

# --- MEASURE CLASSIFICATION ---
# Checked in this order, first substring match wins
DOWNSTREAM_TOKEN = "downstage"
STAGE_TOKEN = "stage"

# --- TABLE VIEW ---
TABLE_SAMPLE_STRIDE = 4  # 15 minute readings -> roughly hourly rows
DISPLAY_TIME_FORMAT = "%H:%M"

# --- UI STYLING ---
THEME_COLORS = {
    "primary": "#2563eb",
    "stage": "#2563eb",
    "downstream": "#16a34a",
    "error": "#ef4444",
    "background": "#fcfcfc",
    "text_main": "#1a1a1a",
    "text_muted": "#666"
}

SERIES_LABELS = {
    "stage": "Stage Level",
    "downstream": "Downstream Level"
}

# --- API SERVER ---
API_HOST = "127.0.0.1"
API_PORT = 5000
