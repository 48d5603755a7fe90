import structlog

from cube_sniper.config import LEGACY_PAGE_PARAMS, LEGACY_PAGE_PATH, WCA_BASE_URL
from cube_sniper.parsers import CompetitionsMapParser
from cube_sniper.scraper import Scraper
from cube_sniper.sources.base_source import BaseSource

logger = structlog.get_logger(__name__)


class WcaHtmlSource(BaseSource):
    """Source for the legacy competitions map page (single request)."""

    def __init__(self, base_url: str = WCA_BASE_URL, scraper: Scraper | None = None):
        super().__init__(base_url, scraper)
        self.parser = CompetitionsMapParser(self.base_url)

    def fetch_payloads(self, region: str, as_of_date: str) -> list[str]:
        # The map page's "present" state already means ongoing and upcoming.
        params = {"region": region, **LEGACY_PAGE_PARAMS}
        response = self.scraper.get(f"{self.base_url}{LEGACY_PAGE_PATH}", params=params)
        logger.debug("map_page_fetched", region=region, as_of_date=as_of_date)
        return [response.text]
