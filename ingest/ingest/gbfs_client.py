from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from urllib.error import URLError
from urllib.request import Request, urlopen

from .config import (
    feed_timeout_seconds,
    feed_user_agent,
    station_information_url,
    station_status_url,
)
from .errors import FeedFormatError, FeedTransportError


def fetch_station_information() -> dict[str, Any]:
    return fetch_json(station_information_url())


def fetch_station_status() -> dict[str, Any]:
    return fetch_json(station_status_url())


def fetch_feeds() -> tuple[dict[str, Any], dict[str, Any]]:
    """Fetch the status and information feeds concurrently.

    Returns ``(status, information)``. Both requests are always awaited; the
    first failure is re-raised once both have finished.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="gbfs-fetch") as pool:
        status_future = pool.submit(fetch_station_status)
        info_future = pool.submit(fetch_station_information)
        status = status_future.result()
        information = info_future.result()
    return status, information


def fetch_json(url: str, timeout: float | None = None) -> dict[str, Any]:
    request = Request(url, headers={"User-Agent": feed_user_agent()})
    if timeout is None:
        timeout = feed_timeout_seconds()
    try:
        with urlopen(request, timeout=timeout) as response:
            payload = response.read()
    except (URLError, TimeoutError) as exc:
        raise FeedTransportError(f"Failed to fetch {url}: {exc}") from exc

    try:
        document = json.loads(payload)
    except ValueError as exc:
        raise FeedFormatError(f"Invalid JSON from {url}") from exc
    if not isinstance(document, dict):
        raise FeedFormatError(f"Expected a JSON object from {url}")
    return document
