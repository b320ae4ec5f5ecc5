from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.engine import Engine

from ...db.queries import stops_matching_name
from ...services.departures_service import (
    StopNotFound,
    StopPlaceFetcher,
    departures_for_many,
    resolve_stop_place_id,
    stop_place_id_for,
)
from ...services.upstream import UpstreamUnavailable
from ..deps import get_db_engine, get_stop_place_fetcher
from ..schemas.departures import (
    DeparturesByNameResponse,
    DeparturesResponse,
    MultipleDeparturesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


@router.get("/bus-departures", response_model=DeparturesResponse)
def bus_departures(
    stop_id: str = Query("", alias="stopId"),
    time_range: int = Query(7200, alias="timeRange"),
    number_of_departures: int = Query(15, alias="numberOfDepartures"),
    engine: Engine = Depends(get_db_engine),
    fetch: StopPlaceFetcher = Depends(get_stop_place_fetcher),
) -> DeparturesResponse:
    if not stop_id.strip():
        raise HTTPException(status_code=400, detail="Please provide a stopId.")

    try:
        stop_place_id = resolve_stop_place_id(engine, stop_id)
        if stop_place_id != stop_id:
            logger.info("Converted Quay ID %s to StopPlace ID %s", stop_id, stop_place_id)
        stop_place = fetch(stop_place_id, time_range, number_of_departures)
    except StopNotFound as exc:
        logger.warning("Could not find parent station for Quay ID %s", stop_id)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UpstreamUnavailable as exc:
        logger.exception("HTTP error when fetching departures for stop %s", stop_id)
        raise HTTPException(status_code=503, detail="Journey planner unavailable") from exc
    except Exception as exc:
        logger.exception("Error fetching departures for stop %s", stop_id)
        raise HTTPException(status_code=500, detail="Failed to fetch departures") from exc

    if stop_place is None:
        raise HTTPException(
            status_code=404, detail=f"Stop {stop_place_id} not found or inactive"
        )
    return DeparturesResponse(
        original_stop_id=stop_id,
        stop_place_id=stop_place_id,
        data=stop_place,
        requested_at=_now(),
    )


@router.get(
    "/bus-departures-multiple",
    response_model=MultipleDeparturesResponse,
    response_model_exclude_none=True,
)
def multiple_bus_departures(
    stop_ids: list[str] = Query([], alias="stopIds"),
    time_range: int = Query(7200, alias="timeRange"),
    number_of_departures: int = Query(15, alias="numberOfDepartures"),
    fetch: StopPlaceFetcher = Depends(get_stop_place_fetcher),
) -> MultipleDeparturesResponse:
    if not stop_ids:
        raise HTTPException(status_code=400, detail="Please provide at least one stopId.")

    results = departures_for_many(fetch, stop_ids, time_range, number_of_departures)
    return MultipleDeparturesResponse(
        requested_stops=len(stop_ids),
        processed_stops=len(results),
        results=results,
        requested_at=_now(),
    )


@router.get("/bus-departures-by-name", response_model=DeparturesByNameResponse)
def bus_departures_by_name(
    stop_name: str = Query("", alias="stopName"),
    time_range: int = Query(7200, alias="timeRange"),
    number_of_departures: int = Query(15, alias="numberOfDepartures"),
    engine: Engine = Depends(get_db_engine),
    fetch: StopPlaceFetcher = Depends(get_stop_place_fetcher),
) -> DeparturesByNameResponse:
    if not stop_name.strip():
        raise HTTPException(status_code=400, detail="Please provide a stop name.")

    try:
        matches = stops_matching_name(engine, stop_name)
        if not matches:
            raise HTTPException(
                status_code=404, detail=f"No stops found matching '{stop_name}'"
            )
        selected = matches[0]
        stop_place_id = stop_place_id_for(selected)
        logger.info("Using StopPlace ID %s for stop name %s", stop_place_id, stop_name)
        stop_place = fetch(stop_place_id, time_range, number_of_departures)
    except HTTPException:
        raise
    except UpstreamUnavailable as exc:
        logger.exception("HTTP error when fetching departures for stop name %s", stop_name)
        raise HTTPException(status_code=503, detail="Journey planner unavailable") from exc
    except Exception as exc:
        logger.exception("Error fetching bus departures by stop name: %s", stop_name)
        raise HTTPException(status_code=500, detail="Failed to fetch bus departures") from exc

    if stop_place is None:
        raise HTTPException(
            status_code=404, detail=f"Stop {stop_place_id} not found or inactive"
        )
    return DeparturesByNameResponse(
        original_stop_id=selected.stop_id,
        stop_place_id=stop_place_id,
        stop_name=selected.stop_name,
        matching_stops_count=len(matches),
        data=stop_place,
        requested_at=_now(),
    )
