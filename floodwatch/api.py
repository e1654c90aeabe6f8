"""
Flask service exposing station readings as JSON.
Run with `python -m floodwatch.api` and query /readings?stationId=<uri>.
"""

import logging
from flask import Flask, jsonify, request
from . import config
from .data import fetch_stations, load_readings
from .exceptions import EmptyResult, FloodWatchError, InvalidInput

logger = logging.getLogger(__name__)


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def create_app() -> Flask:
    app = Flask(__name__)

    @app.after_request
    def no_store(response):
        # Readings must always reflect the latest upstream state
        if request.path == "/readings":
            response.headers["Cache-Control"] = config.NO_CACHE_HEADER
        return response

    @app.route("/readings")
    def readings():
        station_id = (request.args.get("stationId") or "").strip()
        if not station_id:
            return _error("Station ID is required", 400)

        try:
            items = load_readings(station_id)
        except InvalidInput as e:
            return _error(str(e), 400)
        except EmptyResult:
            return _error("No readings found for the station", 404)
        except FloodWatchError as e:
            logger.error(f"Error fetching station readings: {e}")
            return _error("Failed to fetch station readings", 500)
        except Exception:
            logger.exception("Unexpected error fetching station readings")
            return _error("Failed to fetch station readings", 500)

        return jsonify([r.to_item() for r in items])

    @app.route("/stations")
    def stations():
        try:
            items = fetch_stations()
        except FloodWatchError as e:
            logger.error(f"Error fetching stations: {e}")
            return _error("Failed to fetch stations", 500)
        return jsonify([s.to_item() for s in items])

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(host=config.API_HOST, port=config.API_PORT)
