from __future__ import annotations

from fastapi.testclient import TestClient

from ingest.ingest.cache import SnapshotCache

STATIONS = [
    {"station_id": "1", "name": "Torget", "lat": 60.3951, "lon": 5.3254, "num_bikes_available": 4},
    {"station_id": "2", "name": "Festplassen", "lat": 60.3917, "lon": 5.3253, "num_bikes_available": 0},
    {"station_id": "3", "name": "Laksevåg", "lat": 60.3870, "lon": 5.2730, "num_bikes_available": 9},
    {"station_id": "4", "num_bikes_available": 7},
]


def test_empty_cache_returns_empty_list(client: TestClient) -> None:
    response = client.get("/api/bike-data")

    assert response.status_code == 200
    assert response.json() == []


def test_returns_current_snapshot(client: TestClient, cache: SnapshotCache) -> None:
    cache.set(STATIONS)

    assert client.get("/api/bike-data").json() == STATIONS


def test_min_bikes_filter(client: TestClient, cache: SnapshotCache) -> None:
    cache.set(STATIONS)

    response = client.get("/api/bike-data", params={"MinBikes": 5})

    assert [station["station_id"] for station in response.json()] == ["3", "4"]


def test_radius_filter_drops_far_and_unlocated_stations(
    client: TestClient, cache: SnapshotCache
) -> None:
    cache.set(STATIONS)

    response = client.get(
        "/api/bike-data", params={"Lat": 60.3930, "Lon": 5.3250, "RadiusKm": 1}
    )

    assert [station["station_id"] for station in response.json()] == ["1", "2"]


def test_radius_filter_needs_all_three_parameters(
    client: TestClient, cache: SnapshotCache
) -> None:
    cache.set(STATIONS)

    response = client.get("/api/bike-data", params={"Lat": 60.3930, "Lon": 5.3250})

    assert len(response.json()) == len(STATIONS)


def test_root_reports_status(client: TestClient) -> None:
    assert client.get("/").json()["status"] == "ok"
