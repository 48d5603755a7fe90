"""Tests for Scraper error handling (no retries)."""

from unittest.mock import MagicMock, patch

import pytest
from requests import Response
from requests.exceptions import ConnectionError, HTTPError

from cube_sniper.exceptions import TransportError
from cube_sniper.scraper import Scraper


@pytest.fixture()
def scraper() -> Scraper:
    """Create a Scraper instance with zero delay for fast tests."""
    return Scraper(delay_range=(0, 0))


def test_successful_get_returns_response(scraper: Scraper) -> None:
    ok_resp = MagicMock(spec=Response)
    ok_resp.status_code = 200
    ok_resp.text = "[]"

    with patch.object(scraper.session, "get", return_value=ok_resp) as mock_get:
        resp = scraper.get("https://example.com/api", params={"page": "1"})

    assert resp is ok_resp
    mock_get.assert_called_once_with(
        "https://example.com/api", params={"page": "1"}, timeout=scraper.timeout
    )


def test_http_error_raises_transport_error_without_retry(scraper: Scraper) -> None:
    """A 503 is reported once, not retried."""
    err_resp = MagicMock(spec=Response)
    err_resp.status_code = 503
    err_resp.raise_for_status.side_effect = HTTPError(
        "503 Service Unavailable", response=err_resp
    )

    with patch.object(scraper.session, "get", return_value=err_resp) as mock_get:
        with pytest.raises(TransportError) as exc_info:
            scraper.get("https://example.com/api")

    assert mock_get.call_count == 1
    assert exc_info.value.status_code == 503
    assert exc_info.value.url == "https://example.com/api"


def test_connection_error_raises_transport_error(scraper: Scraper) -> None:
    with patch.object(
        scraper.session, "get", side_effect=ConnectionError("Name or service not known")
    ) as mock_get:
        with pytest.raises(TransportError) as exc_info:
            scraper.get("https://example.invalid/")

    assert mock_get.call_count == 1
    assert exc_info.value.status_code is None
    assert "Name or service not known" in exc_info.value.message


@patch("cube_sniper.scraper.time.sleep")
def test_rate_limit_sleeps_between_requests(mock_sleep: MagicMock) -> None:
    scraper = Scraper(delay_range=(5.0, 5.0))
    ok_resp = MagicMock(spec=Response)
    ok_resp.status_code = 200

    with patch.object(scraper.session, "get", return_value=ok_resp):
        scraper.get("https://example.com/a")
        scraper.get("https://example.com/b")

    # first request: last_request_time is 0 so no wait is needed
    assert mock_sleep.call_count == 1
    assert 0 < mock_sleep.call_args.args[0] <= 5.0
