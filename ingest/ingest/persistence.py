from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine

from ..db.models import StopRecord, stops


def count_stops(engine: Engine) -> int:
    with engine.connect() as connection:
        return int(connection.execute(select(func.count()).select_from(stops)).scalar_one())


def write_stops(engine: Engine, records: Sequence[StopRecord]) -> int:
    """Insert all records in a single transaction; nothing is kept on failure."""
    if not records:
        return 0
    with engine.begin() as connection:
        connection.execute(insert(stops), [record.as_row() for record in records])
    return len(records)
