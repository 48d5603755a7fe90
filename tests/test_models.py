import dataclasses

import pytest

from cube_sniper.models import Coordinate, DistanceResult, EventRecord


def _record() -> EventRecord:
    return EventRecord(
        name="Berkeley Summer 2024",
        date_label="Jun 15 - 16, 2024",
        location=Coordinate(37.8715, -122.273),
        city="Berkeley, California",
        detail_url="https://www.worldcubeassociation.org/competitions/BerkeleySummer2024",
    )


def test_coordinate_unpacks_as_lat_lon():
    lat, lon = Coordinate(1.5, -2.5)
    assert (lat, lon) == (1.5, -2.5)


def test_records_are_immutable():
    record = _record()
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.name = "Changed"  # type: ignore[misc]


def test_record_to_dict():
    assert _record().to_dict() == {
        "name": "Berkeley Summer 2024",
        "date": "Jun 15 - 16, 2024",
        "latitude": 37.8715,
        "longitude": -122.273,
        "city": "Berkeley, California",
        "url": "https://www.worldcubeassociation.org/competitions/BerkeleySummer2024",
    }


def test_distance_result_to_dict_rounds_distance():
    result = DistanceResult(record=_record(), distance_miles=12.3456)
    data = result.to_dict()
    assert data["distance_miles"] == 12.35
    assert data["name"] == "Berkeley Summer 2024"
