from __future__ import annotations

from typing import Any

from ..app.config import journey_planner_client_name, journey_planner_url
from .upstream import UpstreamError, request_json

DEPARTURES_QUERY = """
query Departures($id: String!, $timeRange: Int!, $numberOfDepartures: Int!) {
  stopPlace(id: $id) {
    name
    id
    estimatedCalls(timeRange: $timeRange, numberOfDepartures: $numberOfDepartures) {
      realtime
      aimedDepartureTime
      expectedDepartureTime
      destinationDisplay {
        frontText
      }
      serviceJourney {
        line {
          id
          name
          transportMode
        }
      }
    }
  }
}
"""


def departures_request(
    stop_place_id: str, time_range: int, number_of_departures: int
) -> dict[str, Any]:
    return {
        "query": DEPARTURES_QUERY,
        "variables": {
            "id": stop_place_id,
            "timeRange": time_range,
            "numberOfDepartures": number_of_departures,
        },
    }


def fetch_stop_place(
    stop_place_id: str, time_range: int = 7200, number_of_departures: int = 15
) -> dict[str, Any] | None:
    """Return the ``stopPlace`` object with its upcoming calls, or None if unknown."""
    document = request_json(
        journey_planner_url(),
        headers={"ET-Client-Name": journey_planner_client_name()},
        body=departures_request(stop_place_id, time_range, number_of_departures),
    )
    if not isinstance(document, dict):
        raise UpstreamError("Journey planner returned a non-object response")
    data = document.get("data")
    if not isinstance(data, dict):
        return None
    stop_place = data.get("stopPlace")
    if not isinstance(stop_place, dict):
        return None
    return stop_place
