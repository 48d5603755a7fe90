from functools import lru_cache

import pycountry
import structlog

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=128)
def resolve_region(value: str) -> str:
    """
    Normalize a region argument to a WCA region identifier.

    WCA uses ISO 3166-1 alpha-2 codes for countries and "_<Continent>" ids
    (e.g. "_Europe", "_North America") for continents.

    Args:
        value: A continent id, alpha-2/alpha-3 code or country name
            (e.g. "US", "usa", "Sweden", "_Europe").

    Returns:
        The alpha-2 code for recognized countries, otherwise the input unchanged.
    """
    region = value.strip()
    if not region or region.startswith("_"):
        return region

    if len(region) in (2, 3):
        country = pycountry.countries.get(**{f"alpha_{len(region)}": region.upper()})
        if country is not None:
            return str(country.alpha_2)

    try:
        search_result = pycountry.countries.search_fuzzy(region)
        if search_result:
            return str(getattr(search_result[0], "alpha_2", region))
    except LookupError:
        pass

    logger.warning("region_not_resolved", region=region)
    return region
