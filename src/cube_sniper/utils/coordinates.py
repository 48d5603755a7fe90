from cube_sniper.exceptions import ConfigurationError
from cube_sniper.models import Coordinate


def parse_lat_long(value: str) -> Coordinate:
    """Parses a "lat,lon" string into a Coordinate.

    Args:
        value: Latitude and longitude in decimal degrees, e.g. "37.7749,-122.4194".

    Returns:
        The parsed Coordinate.

    Raises:
        ConfigurationError: If the string is not two comma-separated numbers.
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise ConfigurationError(
            f"Invalid location '{value}'",
            parameter="LAT_LONG",
            expected_format="<latitude>,<longitude>",
            example="37.7749,-122.4194",
        )

    try:
        lat, lon = (float(p.strip()) for p in parts)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid location '{value}': {e}",
            parameter="LAT_LONG",
            expected_format="<latitude>,<longitude>",
            example="37.7749,-122.4194",
        ) from e

    return Coordinate(lat, lon)
