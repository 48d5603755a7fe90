import json
from abc import ABC, abstractmethod
from typing import Any

import structlog
from bs4 import BeautifulSoup, Tag

from cube_sniper.config import CONTAINER_ID, SCRIPT_MARKER, WCA_BASE_URL
from cube_sniper.exceptions import (
    ElementNotFoundError,
    EmptyScriptError,
    MalformedJsonError,
    MarkerNotFoundError,
    MissingFieldError,
)
from cube_sniper.models import Coordinate, EventRecord

logger = structlog.get_logger(__name__)


class BaseParser(ABC):
    """Turns one upstream payload into EventRecords.

    Parsing is strict: a single malformed entry fails the whole payload with a
    ParseError, and nothing is returned.
    """

    def __init__(self, base_url: str = WCA_BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    @abstractmethod
    def parse(self, payload: str) -> list[EventRecord]:
        """Parses a payload into records in upstream order.

        Args:
            payload: The raw response body.

        Returns:
            A list of EventRecord objects.

        Raises:
            ParseError: If the payload or any entry is malformed.
        """
        pass

    def _absolute_url(self, path: str) -> str:
        if path.startswith("/"):
            return f"{self.base_url}{path}"
        return f"{self.base_url}/{path}"

    @staticmethod
    def _require_str(
        entry: dict[str, Any], field: str, index: int, non_empty: bool = False
    ) -> str:
        value = entry.get(field)
        if not isinstance(value, str) or (non_empty and not value.strip()):
            raise MissingFieldError(field, index=index, received=value)
        return value

    @staticmethod
    def _require_degrees(entry: dict[str, Any], field: str, index: int) -> float:
        """Reads a coordinate given as a JSON number or a numeric string."""
        value = entry.get(field)
        if isinstance(value, bool):
            raise MissingFieldError(field, index=index, received=value)
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                pass
        raise MissingFieldError(field, index=index, received=value)

    @staticmethod
    def _as_entries(data: Any, snippet: str) -> list[dict[str, Any]]:
        if not isinstance(data, list):
            raise MalformedJsonError(
                f"Expected a JSON array, got {type(data).__name__}", snippet=snippet
            )
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise MalformedJsonError(
                    f"Entry {index} is not a JSON object", snippet=snippet
                )
        return data


class CompetitionsMapParser(BaseParser):
    """Parses the legacy competitions map page.

    The page embeds the competition list as a JavaScript assignment inside a
    <script> in the map container::

        <div id="competitions-map">
          <script>... competitions = [{"name": ..., "marker_date": ...}, ...]; ...</script>
        </div>
    """

    def __init__(
        self,
        base_url: str = WCA_BASE_URL,
        container_id: str = CONTAINER_ID,
        marker: str = SCRIPT_MARKER,
    ) -> None:
        super().__init__(base_url)
        self.container_id = container_id
        self.marker = marker

    def parse(self, payload: str) -> list[EventRecord]:
        script_text = self._extract_script(payload)
        data = self._extract_array(script_text)
        entries = self._as_entries(data, script_text)

        records = [self._parse_entry(entry, i) for i, entry in enumerate(entries)]
        logger.debug("map_page_parsed", count=len(records))
        return records

    def _extract_script(self, html: str) -> str:
        soup = BeautifulSoup(html, "lxml")

        container = soup.find(id=self.container_id)
        if not isinstance(container, Tag):
            raise ElementNotFoundError(self.container_id)

        script = container.find("script")
        if not isinstance(script, Tag):
            raise EmptyScriptError(self.container_id)

        text = str(script.string or "")
        if not text.strip():
            raise EmptyScriptError(self.container_id)
        return text

    def _extract_array(self, script_text: str) -> Any:
        """Decodes the JSON value assigned after the marker.

        The decoder stops at the end of the array literal, so the statement
        terminator and anything after it are ignored, and commas inside string
        values (e.g. "Dec 30, 2023 - Jan 1, 2024") are kept intact.
        """
        pos = script_text.find(self.marker)
        if pos == -1:
            raise MarkerNotFoundError(self.marker, snippet=script_text)

        start = pos + len(self.marker)
        while start < len(script_text) and script_text[start].isspace():
            start += 1

        try:
            data, _end = json.JSONDecoder().raw_decode(script_text, start)
        except json.JSONDecodeError as e:
            raise MalformedJsonError(
                f"Could not decode competitions array: {e.msg}",
                snippet=script_text[start : start + 200],
            ) from e
        return data

    def _parse_entry(self, entry: dict[str, Any], index: int) -> EventRecord:
        name = self._require_str(entry, "name", index, non_empty=True)
        marker_date = self._require_str(entry, "marker_date", index)
        lat = self._require_degrees(entry, "latitude_degrees", index)
        lon = self._require_degrees(entry, "longitude_degrees", index)
        city = self._require_str(entry, "cityName", index)
        url = self._require_str(entry, "url", index)

        return EventRecord(
            name=name,
            date_label=marker_date,
            location=Coordinate(lat, lon),
            city=city,
            detail_url=self._absolute_url(url),
        )


class CompetitionIndexParser(BaseParser):
    """Parses one page of the /api/v0/competition_index JSON API."""

    def parse(self, payload: str) -> list[EventRecord]:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise MalformedJsonError(
                f"Invalid JSON in API response: {e.msg}", snippet=payload[:200]
            ) from e

        entries = self._as_entries(data, payload[:200])
        records = [self._parse_entry(entry, i) for i, entry in enumerate(entries)]
        logger.debug("api_page_parsed", count=len(records))
        return records

    def _parse_entry(self, entry: dict[str, Any], index: int) -> EventRecord:
        name = self._require_str(entry, "name", index, non_empty=True)
        start_date = self._require_str(entry, "start_date", index)
        lat = self._require_degrees(entry, "latitude_degrees", index)
        lon = self._require_degrees(entry, "longitude_degrees", index)
        city = self._require_str(entry, "city", index)

        competition_id = entry.get("id")
        if isinstance(competition_id, bool) or not isinstance(competition_id, (str, int)):
            raise MissingFieldError("id", index=index, received=competition_id)

        return EventRecord(
            name=name,
            date_label=start_date,
            location=Coordinate(lat, lon),
            city=city,
            detail_url=self._absolute_url(f"/competitions/{competition_id}"),
        )
