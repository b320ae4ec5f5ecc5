from __future__ import annotations

from functools import lru_cache

from sqlalchemy.engine import Engine

from ingest.db.engine import create_db_engine


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return create_db_engine()
