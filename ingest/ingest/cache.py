from __future__ import annotations

import threading
from collections.abc import Sequence

from .parser import StationRecord

Snapshot = list[StationRecord]


class SnapshotCache:
    """Holds the most recently published station snapshot.

    A published snapshot is never mutated, so the lock only guards the
    reference swap; copies for readers are taken outside of it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: tuple[StationRecord, ...] = ()

    def set(self, snapshot: Sequence[StationRecord]) -> None:
        frozen = tuple(dict(record) for record in snapshot)
        with self._lock:
            self._snapshot = frozen

    def get(self) -> Snapshot:
        with self._lock:
            current = self._snapshot
        return [dict(record) for record in current]
