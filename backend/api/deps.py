from __future__ import annotations

from typing import Any, Callable

from fastapi import Request
from sqlalchemy.engine import Engine

from ingest.ingest.cache import SnapshotCache

from ..db.engine import get_engine
from ..services.departures_service import StopPlaceFetcher
from ..services.journey_planner import fetch_stop_place
from ..services.weather_service import fetch_forecast


def get_snapshot_cache(request: Request) -> SnapshotCache:
    return request.app.state.snapshot_cache


def get_db_engine(request: Request) -> Engine:
    engine = getattr(request.app.state, "engine", None)
    return engine if engine is not None else get_engine()


def get_stop_place_fetcher() -> StopPlaceFetcher:
    return fetch_stop_place


def get_forecast_fetcher() -> Callable[[], Any]:
    return fetch_forecast
