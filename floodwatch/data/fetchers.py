import requests
import streamlit as st
import logging
import time
from typing import Any, Dict, List, Optional
from .. import config
from ..exceptions import FetchFailed, InvalidInput

logger = logging.getLogger(__name__)

def station_reference(station_id: str) -> str:
    """Extracts the short station reference from a full station URI."""
    return station_id.strip().rstrip('/').split('/')[-1]

def _cache_buster() -> str:
    """Millisecond nonce so every request is unique to intermediate caches."""
    return str(time.time_ns() // 1_000_000)

def _get_items(url: str, params: Dict[str, Any], station_id: Optional[str] = None,
               headers: Optional[Dict[str, str]] = None) -> List[Dict]:
    """Performs a single GET and returns the `items` list of the JSON body."""
    what = f"station {station_id}" if station_id else "stations"
    try:
        resp = requests.get(url, params=params, headers=headers, timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"API Fetch Error for {what}: {e}")
        raise FetchFailed(f"Failed to fetch data for {what}", station_id) from e

    if not resp.ok:
        logger.error(f"API Error {resp.status_code} for {what} at {url}")
        raise FetchFailed(f"Upstream returned {resp.status_code} for {what}", station_id)

    try:
        body = resp.json()
    except ValueError as e:
        logger.error(f"Undecodable response for {what}: {e}")
        raise FetchFailed(f"Malformed response for {what}", station_id) from e

    items = body.get('items') if isinstance(body, dict) else None
    if not isinstance(items, list):
        logger.error(f"No 'items' in response for {what}")
        raise FetchFailed(f"No items in response for {what}", station_id)
    return items

@st.cache_data(ttl=config.DEFAULT_CACHE_TTL_STATIONS)
def fetch_stations_raw(limit: int = config.STATIONS_LIMIT) -> List[Dict]:
    """Fetches raw station items from the Flood Monitoring API."""
    return _get_items(config.FLOOD_STATIONS_URL, {'_limit': limit})

def fetch_station_readings_raw(station_id: str, limit: int = config.READINGS_LIMIT) -> List[Dict]:
    """Fetches the latest raw readings for one station, bypassing any cache."""
    if not station_id or not station_id.strip():
        raise InvalidInput("Station ID is required")

    ref = station_reference(station_id)
    url = config.STATION_READINGS_URL.format(station=ref)
    params = {'_sorted': '', '_limit': limit, '_t': _cache_buster()}
    items = _get_items(url, params, station_id=station_id, headers={'Cache-Control': 'no-cache'})
    logger.info(f"Fetched {len(items)} readings for station {ref}")
    return items
