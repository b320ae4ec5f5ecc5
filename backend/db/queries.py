from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Engine

from ingest.db.models import StopRecord, stops


def _to_record(row: Any) -> StopRecord:
    return StopRecord(**dict(row._mapping))


def _fetch(engine: Engine, statement: Any) -> list[StopRecord]:
    with engine.connect() as connection:
        rows: Iterable[Any] = connection.execute(statement)
        return [_to_record(row) for row in rows]


def fetch_all_stops(engine: Engine) -> list[StopRecord]:
    return _fetch(engine, select(stops).order_by(stops.c.stop_name, stops.c.stop_id))


def search_stops(engine: Engine, text: str) -> list[StopRecord]:
    statement = (
        select(stops)
        .where(stops.c.stop_name.icontains(text, autoescape=True))
        .order_by(stops.c.stop_name, stops.c.stop_id)
    )
    return _fetch(engine, statement)


def stops_matching_name(engine: Engine, text: str) -> list[StopRecord]:
    statement = select(stops).where(stops.c.stop_name.icontains(text, autoescape=True))
    return _fetch(engine, statement)


def find_stop(engine: Engine, stop_id: str) -> StopRecord | None:
    found = _fetch(engine, select(stops).where(stops.c.stop_id == stop_id))
    return found[0] if found else None
