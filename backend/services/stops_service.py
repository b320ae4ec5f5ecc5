from __future__ import annotations

from collections.abc import Sequence

from ingest.db.models import StopRecord

from ..api.schemas.stops import Platform, StopGroup


def group_platforms(stops: Sequence[StopRecord]) -> list[StopGroup]:
    """Group stops under their StopPlace (parent station, or themselves).

    Groups keep first-seen order; platforms are sorted by platform code with
    missing codes first.
    """
    grouped: dict[str, list[StopRecord]] = {}
    for stop in stops:
        grouped.setdefault(stop.parent_station or stop.stop_id, []).append(stop)

    groups = []
    for main_stop_id, members in grouped.items():
        platforms = sorted(
            (
                Platform(
                    stop_id=stop.stop_id,
                    stop_name=stop.stop_name,
                    platform_code=stop.platform_code,
                    is_main_stop=not stop.parent_station,
                )
                for stop in members
            ),
            key=lambda platform: (platform.platform_code is not None, platform.platform_code or ""),
        )
        groups.append(
            StopGroup(
                main_stop_id=main_stop_id,
                main_stop_name=members[0].stop_name,
                has_multiple_platforms=len(members) > 1,
                platforms=platforms,
            )
        )
    return groups
