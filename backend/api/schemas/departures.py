from __future__ import annotations

from datetime import datetime
from typing import Any

from .common import CamelModel


class DeparturesResponse(CamelModel):
    original_stop_id: str
    stop_place_id: str
    data: dict[str, Any]
    requested_at: datetime


class DeparturesByNameResponse(DeparturesResponse):
    stop_name: str
    matching_stops_count: int


class StopDepartures(CamelModel):
    stop_id: str
    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None


class MultipleDeparturesResponse(CamelModel):
    requested_stops: int
    processed_stops: int
    results: list[StopDepartures]
    requested_at: datetime
