import random
import time

import cloudscraper
import structlog
from requests import Response
from requests.exceptions import HTTPError, RequestException

from cube_sniper.exceptions import TransportError

logger = structlog.get_logger(__name__)


class Scraper:
    """Blocking HTTP client for the WCA website.

    Wraps a cloudscraper session so Cloudflare-fronted pages load the same way
    the JSON API does. A failed request is final: there is no retry.
    """

    def __init__(self, delay_range: tuple[float, float] = (0.5, 1.5), timeout: float = 30.0):
        """
        Initialize the Scraper.

        :param delay_range: Tuple (min, max) seconds to wait between consecutive requests.
        :param timeout: Per-request timeout in seconds.
        """
        self.session = cloudscraper.create_scraper()
        self.delay_range = delay_range
        self.timeout = timeout
        self.last_request_time = 0.0

        self.session.headers.update({"Accept-Language": "en-US,en;q=0.9"})

    def _wait_for_rate_limit(self) -> None:
        """Sleeps for a random amount of time to respect rate limits."""
        elapsed = time.time() - self.last_request_time
        wait_time = random.uniform(*self.delay_range)
        if elapsed < wait_time:
            sleep_time = wait_time - elapsed
            logger.debug("rate_limit_sleep", seconds=round(sleep_time, 2))
            time.sleep(sleep_time)
        self.last_request_time = time.time()

    def get(self, url: str, params: dict[str, str] | None = None) -> Response:
        """Perform a single GET request.

        Args:
            url: Target URL.
            params: Query parameters.

        Returns:
            The successful response (status < 400).

        Raises:
            TransportError: On connection failure or an HTTP error status.
        """
        self._wait_for_rate_limit()
        logger.info("fetching_url", url=url, params=params)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("request_failed", url=url, status_code=status, error=str(e))
            raise TransportError(
                f"GET {url} failed with status {status}", url=url, status_code=status
            ) from e
        except RequestException as e:
            logger.error("request_failed", url=url, error=str(e))
            raise TransportError(f"GET {url} failed: {e}", url=url) from e

        return response
