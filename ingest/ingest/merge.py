from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .errors import FeedFormatError
from .parser import StationRecord, flatten


def merge_stations(
    status_rows: Sequence[dict[str, Any]],
    info_rows: Sequence[dict[str, Any]],
) -> list[StationRecord]:
    """Join live status onto static information by ``station_id``.

    Status rows drive the output: one record per status row, in feed order.
    Information fields are copied first and status fields overwrite them.
    Stations that only appear in the information feed are left out.
    """
    merged: list[StationRecord] = []
    for status in status_rows:
        if "station_id" not in status:
            raise FeedFormatError("station_status entry without station_id")
        record: StationRecord = {}
        info = first_matching_info(info_rows, status["station_id"])
        if info is not None:
            record.update(flatten(info))
        record.update(flatten(status))
        merged.append(record)
    return merged


def first_matching_info(
    info_rows: Sequence[dict[str, Any]], station_id: object
) -> dict[str, Any] | None:
    # Linear scan per status row, O(n*m). First match wins when ids repeat.
    for info in info_rows:
        if info.get("station_id") == station_id:
            return info
    return None
