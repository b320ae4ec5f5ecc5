from __future__ import annotations

import pytest

from ingest.ingest import parser
from ingest.ingest.errors import FeedFormatError


def test_station_status_data_reads_fixed_path() -> None:
    payload = {"last_updated": 1, "data": {"stations": [{"station_id": "A"}]}}

    assert parser.station_status_data(payload) == [{"station_id": "A"}]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": []},
        {"data": {}},
        {"data": {"stations": {"station_id": "A"}}},
        {"data": {"stations": ["A"]}},
    ],
)
def test_unexpected_shapes_raise_format_error(payload: dict) -> None:
    with pytest.raises(FeedFormatError):
        parser.station_information_data(payload)


def test_to_scalar_keeps_native_types() -> None:
    assert parser.to_scalar("Torget") == "Torget"
    assert parser.to_scalar(True) is True
    assert parser.to_scalar(None) is None
    assert parser.to_scalar(3) == 3 and isinstance(parser.to_scalar(3), int)
    assert parser.to_scalar(60.39) == 60.39
