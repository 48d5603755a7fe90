#!/usr/bin/env python3
"""Quick start example for Cube Sniper.

Fetches upcoming US competitions from the WCA API and prints those within
100 miles of San Francisco, nearest first.
"""

from datetime import date

from cube_sniper.event_filter import sort_by_distance, within_radius
from cube_sniper.models import Coordinate
from cube_sniper.sources.wca_api_source import WcaApiSource


def main() -> None:
    """Run a simple search."""
    origin = Coordinate(37.7749, -122.4194)
    today = date.today().isoformat()

    print(f"Searching for competitions from {today} near {origin}")

    source = WcaApiSource()
    competitions = source.fetch_competitions("US", today)
    print(f"Found {len(competitions)} upcoming competitions in the US")

    for result in sort_by_distance(within_radius(competitions, origin, 100.0), descending=False):
        print(f"  - {result.record.name} ({result.distance_miles:.1f} mi) {result.record.detail_url}")


if __name__ == "__main__":
    main()
