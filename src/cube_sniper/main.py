import logging
import sys
from datetime import datetime

import click
import structlog

from cube_sniper.config import DEFAULT_RADIUS_MI, WCA_BASE_URL
from cube_sniper.event_filter import sort_by_distance, within_radius
from cube_sniper.exceptions import CubeSniperError
from cube_sniper.output import FORMATTERS
from cube_sniper.sources.base_source import BaseSource
from cube_sniper.sources.wca_api_source import WcaApiSource
from cube_sniper.sources.wca_html_source import WcaHtmlSource
from cube_sniper.utils.coordinates import parse_lat_long
from cube_sniper.utils.country import resolve_region

logger = structlog.get_logger(__name__)

SOURCES: dict[str, type[BaseSource]] = {
    "api": WcaApiSource,
    "html": WcaHtmlSource,
}


def configure_logging(verbose: bool) -> None:
    """Send structlog output to stderr so stdout only carries results."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _validate_as_of(ctx, param, value):
    """Default --as-of to today and check it is a YYYY-MM-DD date."""
    if value is None:
        return datetime.now().strftime("%Y-%m-%d")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError as e:
        raise click.BadParameter("Date must be in YYYY-MM-DD format.") from e
    return value


@click.command()
@click.argument("region")
@click.argument("lat_long")
@click.argument("distance", type=float, default=DEFAULT_RADIUS_MI)
@click.option(
    "--source",
    type=click.Choice(sorted(SOURCES)),
    default="api",
    show_default=True,
    help="Which WCA listing to read.",
)
@click.option(
    "--as-of",
    callback=_validate_as_of,
    help="Only ongoing and future competitions from this date (YYYY-MM-DD). Defaults to today.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(FORMATTERS)),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option("--ascending", is_flag=True, help="List nearest competitions first.")
@click.option(
    "--base-url",
    envvar="CUBE_SNIPER_BASE_URL",
    default=WCA_BASE_URL,
    show_default=True,
    help="Origin of the WCA website.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr.")
def main(region, lat_long, distance, source, as_of, output_format, ascending, base_url, verbose):
    """Find WCA competitions in REGION within DISTANCE miles of LAT_LONG.

    LAT_LONG is "latitude,longitude" in decimal degrees. DISTANCE defaults to 150.
    """
    configure_logging(verbose)

    try:
        origin = parse_lat_long(lat_long)
        wca_region = resolve_region(region)

        logger.info(
            "search_started",
            region=wca_region,
            origin=(origin.latitude, origin.longitude),
            radius_miles=distance,
            as_of=as_of,
            source=source,
        )

        competitions = SOURCES[source](base_url).fetch_competitions(wca_region, as_of)
    except CubeSniperError as e:
        logger.error("search_failed", **e.to_dict())
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    results = sort_by_distance(
        within_radius(competitions, origin, distance), descending=not ascending
    )
    logger.info("search_completed", matches=len(results), total=len(competitions))

    rendered = FORMATTERS[output_format](results)
    if rendered:
        click.echo(rendered.rstrip("\n"))


if __name__ == "__main__":
    main()
