from abc import ABC, abstractmethod

import structlog

from cube_sniper.config import WCA_BASE_URL
from cube_sniper.models import EventRecord
from cube_sniper.parsers import BaseParser
from cube_sniper.scraper import Scraper

logger = structlog.get_logger(__name__)


class BaseSource(ABC):
    """Abstract base class for competition sources.

    A source knows which endpoint to call and which parser understands the
    response. Sources never guess the format from the content.
    """

    parser: BaseParser

    def __init__(self, base_url: str = WCA_BASE_URL, scraper: Scraper | None = None):
        """Initializes the source.

        Args:
            base_url: Origin of the WCA website.
            scraper: An optional shared Scraper instance.
        """
        self.base_url = base_url.rstrip("/")
        self.scraper = scraper or Scraper()

    @abstractmethod
    def fetch_payloads(self, region: str, as_of_date: str) -> list[str]:
        """Fetches the raw response bodies for a region.

        Args:
            region: WCA region identifier (e.g. "US" or "_Europe").
            as_of_date: Anchor date in YYYY-MM-DD format.

        Returns:
            Raw payloads in request order.

        Raises:
            FetchError: If any request fails.
        """
        pass

    def fetch_competitions(self, region: str, as_of_date: str) -> list[EventRecord]:
        """Fetches and parses all competitions for a region.

        Per-payload records are concatenated in fetch order without
        deduplication.

        Raises:
            FetchError: If any request fails.
            ParseError: If any payload is malformed.
        """
        records: list[EventRecord] = []
        for payload in self.fetch_payloads(region, as_of_date):
            records.extend(self.parser.parse(payload))

        logger.info("competitions_found", count=len(records), region=region)
        return records
