import structlog

from cube_sniper.config import API_INDEX_PATH, API_SORT_ORDER, LINK_HEADER, WCA_BASE_URL
from cube_sniper.exceptions import MissingPaginationSignalError
from cube_sniper.parsers import CompetitionIndexParser
from cube_sniper.scraper import Scraper
from cube_sniper.sources.base_source import BaseSource
from cube_sniper.utils.pagination import has_next_page

logger = structlog.get_logger(__name__)


class WcaApiSource(BaseSource):
    """Source backed by the paginated competition_index API."""

    def __init__(self, base_url: str = WCA_BASE_URL, scraper: Scraper | None = None):
        super().__init__(base_url, scraper)
        self.parser = CompetitionIndexParser(self.base_url)

    def fetch_payloads(self, region: str, as_of_date: str) -> list[str]:
        """Requests pages 1, 2, ... until a response has no rel="next" link.

        A response without a readable Link header is treated as an error
        rather than as the last page.
        """
        url = f"{self.base_url}{API_INDEX_PATH}"
        payloads: list[str] = []
        page = 1
        more_pages = True

        while more_pages:
            params = {
                "region": region,
                "include_cancelled": "false",
                "sort": API_SORT_ORDER,
                "ongoing_and_future": as_of_date,
                "page": str(page),
            }
            response = self.scraper.get(url, params=params)
            payloads.append(response.text)

            link_header = response.headers.get(LINK_HEADER)
            if link_header is None:
                logger.error("pagination_header_missing", url=url, page=page)
                raise MissingPaginationSignalError(url=url)
            try:
                more_pages = has_next_page(link_header)
            except ValueError as e:
                logger.error("pagination_header_malformed", url=url, page=page, error=str(e))
                raise MissingPaginationSignalError(url=url, header=link_header) from e

            logger.debug("page_fetched", page=page, more_pages=more_pages)
            page += 1

        logger.info("pages_fetched", count=len(payloads), region=region)
        return payloads
