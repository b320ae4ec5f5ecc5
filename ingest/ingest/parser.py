from __future__ import annotations

import json
from typing import Any

from .errors import FeedFormatError

Scalar = str | int | float | bool | None
StationRecord = dict[str, Scalar]


def station_information_data(payload: dict[str, Any]) -> list[dict[str, Any]]:
    return _stations(payload, "station_information")


def station_status_data(payload: dict[str, Any]) -> list[dict[str, Any]]:
    return _stations(payload, "station_status")


def _stations(payload: dict[str, Any], feed: str) -> list[dict[str, Any]]:
    data = payload.get("data")
    if not isinstance(data, dict):
        raise FeedFormatError(f"{feed} payload has no 'data' object")
    stations = data.get("stations")
    if not isinstance(stations, list):
        raise FeedFormatError(f"{feed} payload has no 'data.stations' array")
    for station in stations:
        if not isinstance(station, dict):
            raise FeedFormatError(f"{feed} contains a non-object station entry")
    return stations


def to_scalar(value: Any) -> Scalar:
    """Map a decoded JSON value onto a flat scalar.

    Strings, booleans, integers, floats and null pass through. Objects and
    arrays are kept as their compact JSON text.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def flatten(station: dict[str, Any]) -> StationRecord:
    return {str(key): to_scalar(value) for key, value in station.items()}
