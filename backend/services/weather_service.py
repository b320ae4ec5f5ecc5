from __future__ import annotations

from typing import Any

from ingest.ingest.config import feed_user_agent

from ..app.config import weather_url
from .upstream import request_json


def fetch_forecast() -> Any:
    return request_json(weather_url(), headers={"User-Agent": feed_user_agent()})
