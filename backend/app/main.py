from __future__ import annotations

import logging
import threading
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from ingest.ingest.cache import SnapshotCache
from ingest.ingest.config import configure_logging
from ingest.ingest.gbfs_client import fetch_feeds
from ingest.ingest.gtfs_client import download_archive
from ingest.ingest.importer import ArchiveFetcher, import_stops
from ingest.ingest.poller import FeedFetcher, RefreshLoop

from ..api.routes import departures, stations, stops, weather
from ..db.engine import get_engine
from .config import background_tasks_enabled, cors_origins

logger = logging.getLogger(__name__)

IMPORTER_JOIN_TIMEOUT_SECONDS = 5.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if not app.state.background_tasks:
        yield
        return

    engine: Engine = app.state.engine if app.state.engine is not None else get_engine()
    importer = threading.Thread(
        target=import_stops,
        args=(engine, app.state.archive_fetcher),
        name="gtfs-import",
        daemon=True,
    )
    importer.start()
    app.state.stop_importer = importer
    loop = RefreshLoop(app.state.snapshot_cache, fetch=app.state.feed_fetcher)
    loop.start()
    app.state.refresh_loop = loop
    try:
        yield
    finally:
        loop.stop()
        importer.join(IMPORTER_JOIN_TIMEOUT_SECONDS)
        if importer.is_alive():
            logger.warning("GTFS import still running at shutdown")


def create_app(
    cache: SnapshotCache | None = None,
    engine: Engine | None = None,
    background_tasks: bool | None = None,
    feed_fetcher: FeedFetcher = fetch_feeds,
    archive_fetcher: ArchiveFetcher = download_archive,
) -> FastAPI:
    app = FastAPI(title="Bergen Transit Dashboard API", lifespan=lifespan)
    app.state.snapshot_cache = cache if cache is not None else SnapshotCache()
    app.state.engine = engine
    app.state.feed_fetcher = feed_fetcher
    app.state.archive_fetcher = archive_fetcher
    app.state.background_tasks = (
        background_tasks_enabled() if background_tasks is None else background_tasks
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(stations.router)
    app.include_router(stops.router)
    app.include_router(departures.router)
    app.include_router(weather.router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": "ok", "service": "bergen-transit-backend"}

    return app


load_dotenv()
configure_logging()
app = create_app()
