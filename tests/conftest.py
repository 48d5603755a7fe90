"""Shared pytest fixtures for cube-sniper tests."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from requests import Response

from cube_sniper.scraper import Scraper


@pytest.fixture
def test_data_dir() -> Path:
    """Returns the path to the test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def map_page_html(test_data_dir: Path) -> str:
    """Legacy competitions map page with 131 competitions."""
    return (test_data_dir / "wca_competitions_map.html").read_text(encoding="utf-8")


@pytest.fixture
def api_page1_json(test_data_dir: Path) -> str:
    """First competition_index API page (25 competitions)."""
    return (test_data_dir / "wca_competition_index_page1.json").read_text(
        encoding="utf-8"
    )


@pytest.fixture
def api_page2_json(test_data_dir: Path) -> str:
    """Second (last) competition_index API page (7 competitions)."""
    return (test_data_dir / "wca_competition_index_page2.json").read_text(
        encoding="utf-8"
    )


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for successful mock responses."""

    def _make(text: str, headers: dict[str, str] | None = None) -> MagicMock:
        resp = MagicMock(spec=Response)
        resp.status_code = 200
        resp.text = text
        resp.headers = headers if headers is not None else {}
        return resp

    return _make


@pytest.fixture
def mock_scraper() -> MagicMock:
    """A Scraper stand-in whose get() responses are set per test."""
    return MagicMock(spec=Scraper)
