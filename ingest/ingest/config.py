from __future__ import annotations

import logging
import os


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def station_information_url() -> str:
    return _get_env(
        "GBFS_STATION_INFORMATION_URL",
        "https://gbfs.urbansharing.com/bergenbysykkel.no/station_information.json",
    )


def station_status_url() -> str:
    return _get_env(
        "GBFS_STATION_STATUS_URL",
        "https://gbfs.urbansharing.com/bergenbysykkel.no/station_status.json",
    )


def feed_user_agent() -> str:
    return _get_env("FEED_USER_AGENT", "BergenApp/1.0")


def feed_timeout_seconds() -> float:
    return float(_get_env("FEED_TIMEOUT_SECONDS", "30"))


def refresh_interval_seconds() -> float:
    return float(_get_env("REFRESH_INTERVAL_SECONDS", "60"))


def gtfs_archive_url() -> str:
    return _get_env(
        "GTFS_ARCHIVE_URL",
        "https://storage.googleapis.com/marduk-production/outbound/gtfs/"
        "rb_sky-aggregated-gtfs.zip",
    )


def gtfs_stops_entry() -> str:
    return _get_env("GTFS_STOPS_ENTRY", "stops.txt")


def gtfs_download_timeout_seconds() -> float:
    return float(_get_env("GTFS_DOWNLOAD_TIMEOUT_SECONDS", "600"))


def log_level() -> str:
    return _get_env("LOG_LEVEL", "INFO").upper()


def database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    if os.getenv("POSTGRES_HOST") is None:
        return "sqlite:///database/stops.db"

    host = _get_env("POSTGRES_HOST", "localhost")
    port = int(_get_env("POSTGRES_PORT", "5432"))
    database = _get_env("POSTGRES_DB", "transit")
    user = _get_env("POSTGRES_USER", "transit")
    password = _get_env("POSTGRES_PASSWORD", "transit")
    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{database}"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
