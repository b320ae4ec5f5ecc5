from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Sequence

from ..db.models import StopRecord

logger = logging.getLogger(__name__)

MIN_STOP_FIELDS = 4


def split_rows(lines: Iterable[str]) -> Iterable[list[str]]:
    """Yield comma-separated rows, dropping the header and blank lines.

    Each line is split on its own, so an unbalanced quote cannot swallow the
    lines after it. Quoted fields may contain commas; surrounding quotes are
    removed.
    """
    header_seen = False
    for line in lines:
        if not line.strip():
            continue
        if not header_seen:
            header_seen = True
            logger.debug("Header line: %s", line)
            continue
        row = next(csv.reader([line]), [])
        yield [field.strip().strip('"') for field in row]


def parse_stops(lines: Iterable[str]) -> list[StopRecord]:
    records: list[StopRecord] = []
    for row in split_rows(lines):
        if len(row) < MIN_STOP_FIELDS:
            logger.warning("Skipping line with insufficient fields: %s", ",".join(row))
            continue
        records.append(stop_from_row(row))
    logger.info("Parsed %d stops", len(records))
    return records


def stop_from_row(row: Sequence[str]) -> StopRecord:
    return StopRecord(
        stop_id=row[0],
        stop_name=row[1],
        stop_lat=_to_float(row[2]),
        stop_lon=_to_float(row[3]),
        stop_desc=_optional(row, 4),
        location_type=_optional(row, 5),
        parent_station=_optional(row, 6),
        wheelchair_boarding=_optional(row, 7),
        vehicle_type=_optional(row, 8),
        platform_code=_optional(row, 9),
    )


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


def _optional(row: Sequence[str], index: int) -> str | None:
    if index >= len(row):
        return None
    return row[index] or None
