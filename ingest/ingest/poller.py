from __future__ import annotations

import enum
import logging
import threading
import time
from typing import Any, Callable

from .cache import Snapshot, SnapshotCache
from .config import refresh_interval_seconds
from .gbfs_client import fetch_feeds
from .merge import merge_stations
from .parser import station_information_data, station_status_data

logger = logging.getLogger(__name__)

FeedFetcher = Callable[[], tuple[dict[str, Any], dict[str, Any]]]
PublishHandler = Callable[[Snapshot], None]


class LoopState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


def poll_once(fetch: FeedFetcher = fetch_feeds) -> Snapshot:
    status, information = fetch()
    return merge_stations(
        station_status_data(status),
        station_information_data(information),
    )


class RefreshLoop:
    """Keeps a :class:`SnapshotCache` in step with the bike-share feeds.

    One cycle fetches both feeds, merges them and publishes the result. A
    failing cycle is logged and dropped so the previous snapshot stays
    visible. The loop sleeps a fixed interval between cycles and exits as
    soon as :meth:`stop` is called.
    """

    def __init__(
        self,
        cache: SnapshotCache,
        fetch: FeedFetcher = fetch_feeds,
        interval_seconds: float | None = None,
        on_publish: PublishHandler | None = None,
    ) -> None:
        self.cache = cache
        self.fetch = fetch
        self.interval_seconds = (
            refresh_interval_seconds() if interval_seconds is None else interval_seconds
        )
        self.on_publish = on_publish
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._state = LoopState.STOPPED

    @property
    def state(self) -> LoopState:
        return self._state

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._state = LoopState.RUNNING
        self._thread = threading.Thread(
            target=self.run, name="bike-refresh", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if not self._thread.is_alive():
                self._thread = None
        self._state = LoopState.STOPPED

    def run(self) -> None:
        self._state = LoopState.RUNNING
        logger.info("Bike refresh loop started (interval %ss)", self.interval_seconds)
        try:
            while not self._stop_event.is_set():
                started_at = time.monotonic()
                self.refresh_once()
                elapsed = time.monotonic() - started_at
                if self._stop_event.wait(max(0.0, self.interval_seconds - elapsed)):
                    break
        finally:
            self._state = LoopState.STOPPED
            logger.info("Bike refresh loop stopped")

    def refresh_once(self) -> bool:
        """Run a single cycle. Returns True when a new snapshot was published."""
        if self._stop_event.is_set():
            return False
        try:
            snapshot = poll_once(self.fetch)
        except Exception:
            logger.exception("Error updating bike data cache")
            return False

        if self._stop_event.is_set():
            return False
        self.cache.set(snapshot)
        logger.debug("Published bike snapshot with %d stations", len(snapshot))
        if self.on_publish is not None:
            try:
                self.on_publish(snapshot)
            except Exception:
                logger.exception("Snapshot publish handler failed")
        return True
