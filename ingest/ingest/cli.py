from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

from ..db.engine import create_db_engine
from .cache import Snapshot, SnapshotCache
from .config import configure_logging
from .importer import import_stops
from .poller import RefreshLoop

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bergen-ingest",
        description="Load transit stops and mirror bike-share station data.",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL.")
    commands = parser.add_subparsers(dest="command", required=True)

    load = commands.add_parser("import-stops", help="Import GTFS stops once if the table is empty.")
    load.add_argument("--database-url", help="Defaults to DATABASE_URL.")

    poll = commands.add_parser("poll", help="Refresh bike station data until interrupted.")
    poll.add_argument("--interval", type=float, help="Seconds between refreshes.")
    return parser.parse_args(argv)


def _log_snapshot(snapshot: Snapshot) -> None:
    logger.info("Bike snapshot refreshed: %d stations", len(snapshot))


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "import-stops":
        engine = create_db_engine(args.database_url)
        import_stops(engine)
        return 0

    loop = RefreshLoop(
        SnapshotCache(), interval_seconds=args.interval, on_publish=_log_snapshot
    )
    try:
        loop.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
