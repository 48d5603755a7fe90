"""Distance filtering for competitions.

Provides:
- ``within_radius``: keep records within a radius of a search point, each
  paired with its distance.
- ``sort_by_distance``: order the results for display.
"""

from collections.abc import Iterable

from cube_sniper.geometry import LatLong, haversine_distance
from cube_sniper.models import DistanceResult, EventRecord


def within_radius(
    records: Iterable[EventRecord], origin: LatLong, radius_miles: float
) -> list[DistanceResult]:
    """Select records whose distance from origin is at most radius_miles.

    Args:
        records: Competitions to test.
        origin: Search point.
        radius_miles: Inclusive radius. A negative radius matches nothing.

    Returns:
        DistanceResult for each matching record, in input order.
    """
    results = []
    for record in records:
        distance = haversine_distance(origin, record.location)
        if distance <= radius_miles:
            results.append(DistanceResult(record=record, distance_miles=distance))
    return results


def sort_by_distance(
    results: Iterable[DistanceResult], descending: bool = True
) -> list[DistanceResult]:
    """Return results ordered by distance (farthest first by default)."""
    return sorted(results, key=lambda r: r.distance_miles, reverse=descending)
