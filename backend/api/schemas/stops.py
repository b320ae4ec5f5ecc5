from __future__ import annotations

from .common import CamelModel


class StopSummary(CamelModel):
    stop_id: str
    stop_name: str
    parent_station: str | None = None


class StopMatch(StopSummary):
    platform_code: str | None = None


class StopSearchResponse(CamelModel):
    search_term: str
    total_results: int
    stops: list[StopMatch]


class AllStopsResponse(CamelModel):
    total_stops: int
    stops: list[StopSummary]


class Platform(CamelModel):
    stop_id: str
    stop_name: str
    platform_code: str | None = None
    is_main_stop: bool


class StopGroup(CamelModel):
    main_stop_id: str
    main_stop_name: str
    has_multiple_platforms: bool
    platforms: list[Platform]


class StopPlatformsResponse(CamelModel):
    search_term: str
    total_stops: int
    stop_groups: list[StopGroup]
