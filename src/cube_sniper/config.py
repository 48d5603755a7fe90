"""Process-wide settings for talking to the WCA website."""

WCA_BASE_URL = "https://www.worldcubeassociation.org"

DEFAULT_RADIUS_MI = 150.0

# Paginated JSON API (current format)
API_INDEX_PATH = "/api/v0/competition_index"
API_SORT_ORDER = "start_date,end_date,name"
LINK_HEADER = "Link"

# Legacy competitions map page
LEGACY_PAGE_PATH = "/competitions"
LEGACY_PAGE_PARAMS = {
    "search": "",
    "state": "present",
    "year": "all years",
    "from_date": "",
    "to_date": "",
    "delegate": "",
    "display": "map",
}
CONTAINER_ID = "competitions-map"
SCRIPT_MARKER = "competitions = "
