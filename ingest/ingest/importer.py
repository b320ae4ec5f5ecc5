from __future__ import annotations

import logging
from typing import Callable

from sqlalchemy.engine import Engine

from ..db.engine import ensure_schema
from .config import gtfs_stops_entry
from .gtfs_client import download_archive, read_entry_lines
from .gtfs_parser import parse_stops
from .persistence import count_stops, write_stops

logger = logging.getLogger(__name__)

ArchiveFetcher = Callable[[], bytes]


def import_stops(
    engine: Engine,
    fetch_archive: ArchiveFetcher = download_archive,
    entry: str | None = None,
) -> int:
    """Populate the stop table from the GTFS archive when it is empty.

    Returns the number of inserted stops. Failures are logged and yield 0;
    rows are only written once the whole file has been parsed.
    """
    entry = entry or gtfs_stops_entry()
    try:
        ensure_schema(engine)
        existing = count_stops(engine)
        if existing > 0:
            logger.info("Stop data already exists in database (%d stops)", existing)
            return 0

        logger.info("No stop data found, starting download and import")
        lines = read_entry_lines(fetch_archive(), entry)
        logger.info("Parsing %d lines from %s", len(lines), entry)
        records = parse_stops(lines)
        if not records:
            logger.warning("No stops were parsed from the GTFS archive")
            return 0

        inserted = write_stops(engine, records)
    except Exception:
        logger.exception("Failed to import GTFS stops")
        return 0

    logger.info("Imported %d stops into the database", inserted)
    return inserted
