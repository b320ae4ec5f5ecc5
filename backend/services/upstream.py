from __future__ import annotations

import json
from typing import Any
from urllib.error import URLError
from urllib.request import Request, urlopen

from ..app.config import upstream_timeout_seconds


class UpstreamUnavailable(Exception):
    """The upstream API could not be reached or returned an error status."""


class UpstreamError(Exception):
    """The upstream API answered with something we cannot use."""


def request_json(
    url: str,
    headers: dict[str, str],
    body: dict[str, Any] | None = None,
) -> Any:
    data = None
    if body is not None:
        data = json.dumps(body).encode("utf-8")
        headers = {**headers, "Content-Type": "application/json"}
    request = Request(url, data=data, headers=headers, method="POST" if data else "GET")
    try:
        with urlopen(request, timeout=upstream_timeout_seconds()) as response:
            payload = response.read()
    except (URLError, TimeoutError) as exc:
        raise UpstreamUnavailable(f"{url}: {exc}") from exc

    if not payload.strip():
        raise UpstreamError(f"Empty response from {url}")
    try:
        return json.loads(payload)
    except ValueError as exc:
        raise UpstreamError(f"Invalid JSON from {url}") from exc
