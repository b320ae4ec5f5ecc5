from __future__ import annotations

from collections.abc import Iterable

from ingest.ingest.parser import StationRecord

from .distance import within_radius


def filter_stations(
    stations: Iterable[StationRecord],
    min_bikes: int | None = None,
    lat: float | None = None,
    lon: float | None = None,
    radius_km: float | None = None,
) -> list[StationRecord]:
    """Apply the optional bike-count and radius filters of the bike endpoint.

    The radius filter only applies when lat, lon and radius are all given.
    Records missing a filtered attribute are dropped by that filter.
    """
    filtered = list(stations)
    if min_bikes is not None:
        filtered = [
            station
            for station in filtered
            if (bikes := _number(station.get("num_bikes_available"))) is not None
            and bikes >= min_bikes
        ]
    if lat is not None and lon is not None and radius_km is not None:
        filtered = [
            station
            for station in filtered
            if _near(station, lat, lon, radius_km)
        ]
    return filtered


def _near(station: StationRecord, lat: float, lon: float, radius_km: float) -> bool:
    station_lat = _number(station.get("lat"))
    station_lon = _number(station.get("lon"))
    if station_lat is None or station_lon is None:
        return False
    return within_radius(station_lat, station_lon, lat, lon, radius_km)


def _number(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
