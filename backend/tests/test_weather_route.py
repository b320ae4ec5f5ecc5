from __future__ import annotations

from fastapi.testclient import TestClient

from backend.api.deps import get_forecast_fetcher
from backend.services.upstream import UpstreamUnavailable

FORECAST = {
    "type": "Feature",
    "properties": {
        "timeseries": [
            {"time": "2026-10-18T10:00:00Z", "data": {"instant": {"details": {"air_temperature": 9.4}}}}
        ]
    },
}


def test_forecast_is_passed_through(client: TestClient) -> None:
    client.app.dependency_overrides[get_forecast_fetcher] = lambda: lambda: FORECAST

    response = client.get("/api/bergen-temp")

    assert response.status_code == 200
    assert response.json() == FORECAST


def test_forecast_failure_is_500(client: TestClient) -> None:
    def failing() -> dict:
        raise UpstreamUnavailable("met.no down")

    client.app.dependency_overrides[get_forecast_fetcher] = lambda: failing

    response = client.get("/api/bergen-temp")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch"}
