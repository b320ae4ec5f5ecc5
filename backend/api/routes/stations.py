from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from ingest.ingest.cache import SnapshotCache

from ...core.stations import filter_stations
from ..deps import get_snapshot_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/bike-data")
def list_bike_stations(
    min_bikes: int | None = Query(None, alias="MinBikes"),
    lat: float | None = Query(None, alias="Lat"),
    lon: float | None = Query(None, alias="Lon"),
    radius_km: float | None = Query(None, alias="RadiusKm"),
    cache: SnapshotCache = Depends(get_snapshot_cache),
) -> list[dict[str, Any]]:
    try:
        return filter_stations(
            cache.get(), min_bikes=min_bikes, lat=lat, lon=lon, radius_km=radius_km
        )
    except Exception as exc:
        logger.exception("Error fetching bike data")
        raise HTTPException(status_code=500, detail="Failed to fetch") from exc
