"""Tests for Link header parsing."""

import pytest

from cube_sniper.utils.pagination import has_next_page

BASE = "https://www.worldcubeassociation.org/api/v0/competition_index"


def test_next_relation_detected() -> None:
    header = (
        f'<{BASE}?page=2>; rel="next", <{BASE}?page=5>; rel="last"'
    )
    assert has_next_page(header) is True


def test_last_page_has_no_next() -> None:
    header = f'<{BASE}?page=1>; rel="first", <{BASE}?page=4>; rel="prev"'
    assert has_next_page(header) is False


def test_unquoted_and_multi_value_rel() -> None:
    assert has_next_page(f"<{BASE}?page=2>; rel=next") is True
    assert has_next_page(f'<{BASE}?page=2>; rel="last next"') is True


def test_similar_relation_names_not_next() -> None:
    assert has_next_page(f'<{BASE}?page=2>; rel="nextpage"') is False


def test_commas_inside_urls_do_not_split() -> None:
    """The API sort parameter contains commas inside the URL."""
    url = f"{BASE}?sort=start_date,end_date,name&page=2"
    header = f'<{url}>; rel="next", <{BASE}?page=9>; rel="last"'

    assert has_next_page(header) is True


@pytest.mark.parametrize("header", ["", "   ", "rel=next", "page=2; rel=next"])
def test_malformed_header_raises(header: str) -> None:
    with pytest.raises(ValueError):
        has_next_page(header)


def test_comma_inside_quoted_parameter() -> None:
    header = (
        f'<{BASE}?page=2>; rel="next"; title="Page 2, of 5", '
        f'<{BASE}?page=5>; rel="last"'
    )
    assert has_next_page(header) is True


def test_relation_type_is_case_insensitive() -> None:
    assert has_next_page(f'<{BASE}?page=2>; rel="NEXT"') is True
    assert has_next_page(f'<{BASE}?page=2>; REL="Next"') is True


def test_link_without_url_is_malformed() -> None:
    with pytest.raises(ValueError):
        has_next_page('<>; rel="next"')
