from typing import Optional


class FloodWatchError(Exception):
    """Base class for failures raised by the readings pipeline."""


class InvalidInput(FloodWatchError):
    """A required identifier was missing or empty."""


class FetchFailed(FloodWatchError):
    """The upstream API could not be reached or answered with an error."""

    def __init__(self, message: str, station_id: Optional[str] = None):
        super().__init__(message)
        self.station_id = station_id


class EmptyResult(FloodWatchError):
    """The upstream API answered correctly but returned no readings."""

    def __init__(self, station_id: str):
        super().__init__(f"No readings found for station {station_id}")
        self.station_id = station_id
