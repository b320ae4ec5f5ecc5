from __future__ import annotations

import io
import json
from typing import Any
from urllib.error import URLError
from urllib.request import Request

import pytest

from ingest.ingest import gbfs_client
from ingest.ingest.errors import FeedFormatError, FeedTransportError


class _Response(io.BytesIO):
    def __enter__(self) -> "_Response":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


def test_fetch_json_sends_user_agent(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[Request] = []

    def fake_urlopen(request: Request, timeout: float) -> _Response:
        seen.append(request)
        return _Response(b'{"data": {"stations": []}}')

    monkeypatch.setenv("FEED_USER_AGENT", "TransitDash/2.0 (ops@example.org)")
    monkeypatch.setattr(gbfs_client, "urlopen", fake_urlopen)

    assert gbfs_client.fetch_json("https://feeds.example/status.json") == {
        "data": {"stations": []}
    }
    assert seen[0].get_header("User-agent") == "TransitDash/2.0 (ops@example.org)"


def test_fetch_json_wraps_network_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_urlopen(request: Request, timeout: float) -> _Response:
        raise URLError("unreachable")

    monkeypatch.setattr(gbfs_client, "urlopen", fake_urlopen)

    with pytest.raises(FeedTransportError):
        gbfs_client.fetch_json("https://feeds.example/status.json")


def test_fetch_json_rejects_invalid_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        gbfs_client, "urlopen", lambda request, timeout: _Response(b"<html>")
    )

    with pytest.raises(FeedFormatError):
        gbfs_client.fetch_json("https://feeds.example/status.json")


def test_fetch_feeds_returns_status_then_information(monkeypatch: pytest.MonkeyPatch) -> None:
    payloads = {
        "https://feeds.example/status.json": {"feed": "status"},
        "https://feeds.example/info.json": {"feed": "information"},
    }

    def fake_urlopen(request: Request, timeout: float) -> _Response:
        return _Response(json.dumps(payloads[request.full_url]).encode())

    monkeypatch.setenv("GBFS_STATION_STATUS_URL", "https://feeds.example/status.json")
    monkeypatch.setenv("GBFS_STATION_INFORMATION_URL", "https://feeds.example/info.json")
    monkeypatch.setattr(gbfs_client, "urlopen", fake_urlopen)

    status, information = gbfs_client.fetch_feeds()

    assert status == {"feed": "status"}
    assert information == {"feed": "information"}
