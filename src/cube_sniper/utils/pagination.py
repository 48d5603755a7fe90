from requests.utils import parse_header_links


def has_next_page(link_header: str) -> bool:
    """Checks whether a Link header advertises a rel="next" page.

    Args:
        link_header: The raw header value, a comma-separated list of link
            descriptors such as '<https://...&page=2>; rel="next"'.

    Returns:
        True if any descriptor has a "next" relation (case-insensitive).

    Raises:
        ValueError: If the header is empty or does not consist of <url> links.
    """
    if not link_header or not link_header.strip().startswith("<"):
        raise ValueError(f"malformed Link header: {link_header!r}")

    links = parse_header_links(link_header)
    if not links or any(not link.get("url") for link in links):
        raise ValueError(f"malformed Link header: {link_header!r}")

    for link in links:
        for key, value in link.items():
            if key.lower() == "rel" and "next" in value.lower().split():
                return True
    return False
