from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from sqlalchemy import Column, Float, MetaData, String, Table

metadata = MetaData()

stops = Table(
    "stops",
    metadata,
    Column("stop_id", String, primary_key=True),
    Column("stop_name", String, nullable=False, default=""),
    Column("stop_lat", Float, nullable=False, default=0.0),
    Column("stop_lon", Float, nullable=False, default=0.0),
    Column("stop_desc", String, nullable=True),
    Column("location_type", String, nullable=True),
    Column("parent_station", String, nullable=True, index=True),
    Column("wheelchair_boarding", String, nullable=True),
    Column("vehicle_type", String, nullable=True),
    Column("platform_code", String, nullable=True),
)


@dataclass(frozen=True)
class StopRecord:
    stop_id: str
    stop_name: str
    stop_lat: float
    stop_lon: float
    stop_desc: str | None = None
    location_type: str | None = None
    parent_station: str | None = None
    wheelchair_boarding: str | None = None
    vehicle_type: str | None = None
    platform_code: str | None = None

    def as_row(self) -> dict[str, Any]:
        return asdict(self)
