from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from backend.app.main import create_app
from ingest.db.engine import ensure_schema
from ingest.db.models import StopRecord
from ingest.ingest.cache import SnapshotCache
from ingest.ingest.persistence import write_stops

STOPS = [
    StopRecord("NSR:StopPlace:10", "Bergen busstasjon", 60.3888, 5.3367, location_type="1"),
    StopRecord(
        "NSR:Quay:11", "Bergen busstasjon", 60.3889, 5.3368,
        parent_station="NSR:StopPlace:10", platform_code="B",
    ),
    StopRecord(
        "NSR:Quay:12", "Bergen busstasjon", 60.3890, 5.3369,
        parent_station="NSR:StopPlace:10", platform_code="A",
    ),
    StopRecord("NSR:StopPlace:20", "Torget", 60.3951, 5.3254),
    StopRecord("NSR:Quay:30", "Orphan quay", 60.1, 5.1),
]


@pytest.fixture()
def engine() -> Engine:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    ensure_schema(engine)
    write_stops(engine, STOPS)
    return engine


@pytest.fixture()
def cache() -> SnapshotCache:
    return SnapshotCache()


@pytest.fixture()
def client(engine: Engine, cache: SnapshotCache) -> TestClient:
    app = create_app(cache=cache, engine=engine, background_tasks=False)
    return TestClient(app)
