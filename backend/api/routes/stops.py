from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.engine import Engine

from ...db.queries import fetch_all_stops, search_stops, stops_matching_name
from ...services.stops_service import group_platforms
from ..deps import get_db_engine
from ..schemas.stops import (
    AllStopsResponse,
    StopMatch,
    StopPlatformsResponse,
    StopSearchResponse,
    StopSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stops")


@router.get("/search", response_model=StopSearchResponse)
def search(
    query: str = Query(""), engine: Engine = Depends(get_db_engine)
) -> StopSearchResponse:
    if not query.strip():
        raise HTTPException(status_code=400, detail="Please provide a search query.")
    try:
        matches = search_stops(engine, query)
    except Exception as exc:
        logger.exception("Error searching stops for query: %s", query)
        raise HTTPException(status_code=500, detail="Failed to search stops") from exc

    return StopSearchResponse(
        search_term=query,
        total_results=len(matches),
        stops=[
            StopMatch(
                stop_id=stop.stop_id,
                stop_name=stop.stop_name,
                platform_code=stop.platform_code,
                parent_station=stop.parent_station,
            )
            for stop in matches
        ],
    )


@router.get("/all", response_model=AllStopsResponse)
def all_stops(engine: Engine = Depends(get_db_engine)) -> AllStopsResponse:
    try:
        stops = fetch_all_stops(engine)
    except Exception as exc:
        logger.exception("Error fetching all stops")
        raise HTTPException(status_code=500, detail="Failed to fetch stops") from exc

    return AllStopsResponse(
        total_stops=len(stops),
        stops=[
            StopSummary(
                stop_id=stop.stop_id,
                stop_name=stop.stop_name,
                parent_station=stop.parent_station,
            )
            for stop in stops
        ],
    )


@router.get("/platforms", response_model=StopPlatformsResponse)
def platforms(
    stop_name: str = Query("", alias="stopName"),
    engine: Engine = Depends(get_db_engine),
) -> StopPlatformsResponse:
    if not stop_name.strip():
        raise HTTPException(status_code=400, detail="Please provide a stop name.")
    try:
        matches = stops_matching_name(engine, stop_name)
    except Exception as exc:
        logger.exception("Error fetching platforms for stop: %s", stop_name)
        raise HTTPException(status_code=500, detail="Failed to fetch platforms") from exc
    if not matches:
        raise HTTPException(
            status_code=404, detail=f"No stops found matching '{stop_name}'"
        )

    return StopPlatformsResponse(
        search_term=stop_name,
        total_stops=len(matches),
        stop_groups=group_platforms(matches),
    )
