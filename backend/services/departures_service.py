from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable

from sqlalchemy.engine import Engine

from ingest.db.models import StopRecord

from ..db.queries import find_stop

logger = logging.getLogger(__name__)

QUAY_PREFIX = "NSR:Quay:"
MAX_STOPS_PER_REQUEST = 10

StopPlaceFetcher = Callable[[str, int, int], dict[str, Any] | None]


class StopNotFound(Exception):
    pass


def stop_place_id_for(stop: StopRecord) -> str:
    return stop.parent_station or stop.stop_id


def resolve_stop_place_id(engine: Engine, stop_id: str) -> str:
    """Quay ids are swapped for their parent StopPlace; other ids pass through."""
    if not stop_id.startswith(QUAY_PREFIX):
        return stop_id
    stop = find_stop(engine, stop_id)
    if stop is None or not stop.parent_station:
        raise StopNotFound(f"Stop {stop_id} not found in database")
    return stop.parent_station


def departures_for_many(
    fetch: StopPlaceFetcher,
    stop_ids: Sequence[str],
    time_range: int,
    number_of_departures: int,
) -> list[dict[str, Any]]:
    results: list[dict[str, Any]] = []
    for stop_id in stop_ids[:MAX_STOPS_PER_REQUEST]:
        try:
            stop_place = fetch(stop_id, time_range, number_of_departures)
        except Exception as exc:
            logger.warning("Error fetching departures for stop %s", stop_id, exc_info=True)
            results.append({"stopId": stop_id, "success": False, "error": str(exc)})
            continue
        if stop_place is None:
            results.append(
                {"stopId": stop_id, "success": False, "error": "Stop not found or inactive"}
            )
        else:
            results.append({"stopId": stop_id, "success": True, "data": stop_place})
    return results
