from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Values come straight from upstream and are not range-checked.
    """

    latitude: float
    longitude: float

    def __iter__(self):
        yield self.latitude
        yield self.longitude


@dataclass(frozen=True)
class EventRecord:
    """
    A competition normalized from either upstream format.

    date_label is free text ("Mar 2 - 3, 2024" or "2024-03-02"), never parsed.
    detail_url is absolute (base origin + upstream relative path).
    """

    name: str
    date_label: str
    location: Coordinate
    city: str
    detail_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "date": self.date_label,
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "city": self.city,
            "url": self.detail_url,
        }


@dataclass(frozen=True)
class DistanceResult:
    """An EventRecord paired with its distance from the search origin."""

    record: EventRecord
    distance_miles: float

    def to_dict(self) -> dict[str, Any]:
        data = self.record.to_dict()
        data["distance_miles"] = round(self.distance_miles, 2)
        return data
