from __future__ import annotations

from ingest.db.models import StopRecord
from ingest.ingest.gtfs_parser import parse_stops

HEADER = (
    "stop_id,stop_name,stop_lat,stop_lon,stop_desc,location_type,parent_station,"
    "wheelchair_boarding,vehicle_type,platform_code"
)


def test_full_row_maps_positionally() -> None:
    stops = parse_stops(
        [
            HEADER,
            "NSR:Quay:1,Bergen busstasjon,60.3888,5.3367,Terminal,0,NSR:StopPlace:10,1,701,A",
        ]
    )

    assert stops == [
        StopRecord(
            stop_id="NSR:Quay:1",
            stop_name="Bergen busstasjon",
            stop_lat=60.3888,
            stop_lon=5.3367,
            stop_desc="Terminal",
            location_type="0",
            parent_station="NSR:StopPlace:10",
            wheelchair_boarding="1",
            vehicle_type="701",
            platform_code="A",
        )
    ]


def test_missing_trailing_fields_default_to_none() -> None:
    stops = parse_stops([HEADER, "NSR:StopPlace:10,Bergen busstasjon,60.3888,5.3367"])

    assert stops[0].stop_desc is None
    assert stops[0].parent_station is None
    assert stops[0].platform_code is None


def test_line_with_fewer_than_four_fields_is_skipped() -> None:
    stops = parse_stops(
        [
            HEADER,
            "NSR:Quay:1,Broken,60.1",
            "NSR:Quay:2,Torget,60.3951,5.3254",
        ]
    )

    assert [stop.stop_id for stop in stops] == ["NSR:Quay:2"]


def test_unparseable_coordinate_becomes_zero() -> None:
    stops = parse_stops([HEADER, "NSR:Quay:3,Nowhere,north,5.5"])

    assert len(stops) == 1
    assert stops[0].stop_lat == 0
    assert stops[0].stop_lon == 5.5


def test_header_and_blank_lines_are_ignored() -> None:
    stops = parse_stops([HEADER, "", "   ", "NSR:Quay:4,Festplassen,60.39,5.33"])

    assert [stop.stop_name for stop in stops] == ["Festplassen"]


def test_quoted_fields_are_unwrapped() -> None:
    stops = parse_stops([HEADER, '"NSR:Quay:5","Nygårdsgaten, Bergen","60.38","5.33"'])

    assert stops[0].stop_id == "NSR:Quay:5"
    assert stops[0].stop_name == "Nygårdsgaten, Bergen"
    assert stops[0].stop_lat == 60.38


def test_unbalanced_quote_only_affects_its_own_line() -> None:
    stops = parse_stops(
        [
            HEADER,
            'NSR:Quay:1,"Broken,60.1,5.3',
            "NSR:Quay:2,Torget,60.39,5.32",
            "NSR:Quay:3,Festplassen,60.39,5.33",
        ]
    )

    assert [stop.stop_id for stop in stops] == ["NSR:Quay:2", "NSR:Quay:3"]
