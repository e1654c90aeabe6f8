import pytest
import requests

from floodwatch.data import fetchers

STATION_ID = "http://environment.data.gov.uk/flood-monitoring/id/stations/1491TH"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeGet:
    """Stands in for requests.get, recording every call it receives."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def __call__(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture(autouse=True)
def clear_station_cache():
    fetchers.fetch_stations_raw.clear()
    yield
    fetchers.fetch_stations_raw.clear()


@pytest.fixture
def fake_get(monkeypatch):
    """Returns a factory installing a FakeGet as requests.get for the fetchers."""

    def _install(payload=None, status_code=200, exc=None, json_error=False):
        fake = FakeGet(FakeResponse(status_code, payload, json_error), exc)
        monkeypatch.setattr(fetchers.requests, "get", fake)
        return fake

    return _install


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


def reading(date_time, measure, value, idx=0):
    return {
        "@id": f"http://environment.data.gov.uk/flood-monitoring/data/readings/{idx}",
        "dateTime": date_time,
        "measure": measure,
        "value": value,
    }


STAGE = "http://environment.data.gov.uk/flood-monitoring/id/measures/1491TH-level-stage-i-15_min-mASD"
DOWNSTAGE = "http://environment.data.gov.uk/flood-monitoring/id/measures/1491TH-level-downstage-i-15_min-mASD"
FLOW = "http://environment.data.gov.uk/flood-monitoring/id/measures/1491TH-flow--i-15_min-m3_s"
