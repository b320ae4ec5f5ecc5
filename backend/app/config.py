from __future__ import annotations

import os


def journey_planner_url() -> str:
    return os.getenv("JOURNEY_PLANNER_URL", "https://api.entur.io/journey-planner/v3/graphql")


def journey_planner_client_name() -> str:
    return os.getenv("JOURNEY_PLANNER_CLIENT_NAME", "student/Bergen-app")


def weather_url() -> str:
    return os.getenv(
        "WEATHER_URL",
        "https://api.met.no/weatherapi/locationforecast/2.0/compact?lat=60.3913&lon=5.3221",
    )


def upstream_timeout_seconds() -> float:
    return float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30"))


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def background_tasks_enabled() -> bool:
    return os.getenv("BACKGROUND_TASKS", "1").strip().lower() not in {"0", "false", "no", "off"}
