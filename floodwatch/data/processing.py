import pandas as pd
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from .. import config
from ..exceptions import EmptyResult
from ..models import RawReading, SeriesPoint, Station, TransformResult
from .fetchers import fetch_stations_raw, fetch_station_readings_raw

logger = logging.getLogger(__name__)

def parse_timestamp(value: str) -> datetime:
    """Parses an ISO-8601 timestamp; values without an offset are taken as UTC."""
    dt = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt

def format_display_time(value: str) -> str:
    """Renders a timestamp as local HH:MM for chart axes and table rows."""
    return parse_timestamp(value).astimezone().strftime(config.DISPLAY_TIME_FORMAT)

def classify_measure(measure: str) -> Optional[str]:
    """Maps a measure URI to the series it feeds, or None if it feeds neither."""
    if config.DOWNSTREAM_TOKEN in measure:
        return 'downstream'
    if config.STAGE_TOKEN in measure:
        return 'stage'
    return None

def parse_readings(items: List[Dict[str, Any]]) -> List[RawReading]:
    """Converts raw API items into readings, skipping malformed records."""
    out = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning(f"Skipping malformed reading {item!r}: not an object")
            continue
        try:
            reading = RawReading.from_item(item)
            parse_timestamp(reading.date_time)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed reading {item.get('@id', '?')}: {e}")
            continue
        out.append(reading)
    return out

def parse_stations(items: List[Dict[str, Any]]) -> List[Station]:
    out = []
    for item in items:
        if not isinstance(item, dict) or not item.get('@id'):
            logger.warning(f"Skipping station without @id: {item}")
            continue
        out.append(Station.from_item(item))
    return out

def fetch_stations(limit: int = config.STATIONS_LIMIT) -> List[Station]:
    """Retrieves the selectable monitoring stations."""
    return parse_stations(fetch_stations_raw(limit))

def fetch_readings(station_id: str) -> List[RawReading]:
    """Retrieves and validates the current readings for a station."""
    return parse_readings(fetch_station_readings_raw(station_id))

def load_readings(station_id: str) -> List[RawReading]:
    """Like fetch_readings, but treats an empty result as a failure."""
    readings = fetch_readings(station_id)
    if not readings:
        raise EmptyResult(station_id)
    return readings

def transform(readings: List[RawReading]) -> TransformResult:
    """
    Groups readings by timestamp into chart-ready points.

    Readings are classified by substring of their measure ("downstage" before
    "stage"). A later reading with the same timestamp and classification
    overwrites the earlier value. Points are ordered by parsed timestamp.
    """
    grouped: Dict[str, Dict[str, Any]] = {}
    for reading in readings:
        entry = grouped.get(reading.date_time)
        if entry is None:
            entry = grouped[reading.date_time] = {
                'date_time': reading.date_time,
                'display_time': format_display_time(reading.date_time),
            }

        field = classify_measure(reading.measure)
        if field:
            entry[field] = reading.value

    # sorted() is stable, so equal instants keep first-seen order
    points = [SeriesPoint(**e) for e in sorted(grouped.values(), key=lambda e: parse_timestamp(e['date_time']))]
    return TransformResult(
        points=points,
        has_stage=any(p.stage is not None for p in points),
        has_downstream=any(p.downstream is not None for p in points),
    )

def sample(points: List[SeriesPoint], stride: int = config.TABLE_SAMPLE_STRIDE) -> List[SeriesPoint]:
    """Keeps every `stride`-th point starting at the first, by position not time."""
    return list(points[::stride])

def to_frame(points: List[SeriesPoint]) -> pd.DataFrame:
    """Long-format frame (one row per point and series) for charting."""
    rows = []
    for p in points:
        for field in ('stage', 'downstream'):
            value = getattr(p, field)
            if value is not None:
                rows.append({
                    'dateTime': parse_timestamp(p.date_time),
                    'time': p.display_time,
                    'series': config.SERIES_LABELS[field],
                    'value': value,
                })
    return pd.DataFrame(rows, columns=['dateTime', 'time', 'series', 'value'])

def to_table(points: List[SeriesPoint], has_stage: bool, has_downstream: bool) -> pd.DataFrame:
    """Tabular view of the sampled points with only the series that are present."""
    def _fmt(v: Optional[float]) -> str:
        return f"{v:.3f}" if v is not None else "-"

    rows = []
    for p in sample(points):
        row = {'Time': p.display_time}
        if has_stage:
            row['Stage (m)'] = _fmt(p.stage)
        if has_downstream:
            row['Downstream (m)'] = _fmt(p.downstream)
        rows.append(row)

    cols = ['Time'] + (['Stage (m)'] if has_stage else []) + (['Downstream (m)'] if has_downstream else [])
    return pd.DataFrame(rows, columns=cols)
