"""Custom exception hierarchy for cube-sniper.

Every failure in the fetch/parse pipeline is terminal for the run. Exceptions
carry structured context and a correction hint so the CLI can log them with
``to_dict()`` and print a readable message.
"""

from typing import Any


class CubeSniperError(Exception):
    """Root of every error raised while searching for competitions.

    ``error_data`` is the structured context that goes into the log line;
    ``suggestion`` is printed under the message on the command line.
    """

    def __init__(
        self,
        message: str,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_data = dict(error_data or {})
        self.suggestion = suggestion

    def __str__(self) -> str:
        lines = [self.message]
        if self.suggestion:
            lines.append(f"Suggestion: {self.suggestion}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the error for ``logger.error(event, **err.to_dict())``.

        Context keys whose value is None are left out of ``error_data``.
        """
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_data": {k: v for k, v in self.error_data.items() if v is not None},
            "suggestion": self.suggestion,
        }


# --- Parsing ---


class ParseError(CubeSniperError):
    """A payload could not be turned into competition records.

    Parsing is all-or-nothing: one bad entry fails the whole payload.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        snippet: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize parse error.

        Args:
            message: Human-readable error message.
            field: Field name that failed to parse (if applicable).
            snippet: Relevant payload excerpt (truncated).
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update(
            {
                "field": field,
                "snippet": snippet[:500] if snippet else None,
            }
        )

        default_suggestion = suggestion or (
            "The upstream format may have changed. Review the parser implementation."
        )

        super().__init__(message, data, default_suggestion)
        self.field = field


class ElementNotFoundError(ParseError):
    """The container element holding the competitions script is missing."""

    def __init__(self, element_id: str):
        super().__init__(
            f"Element with id '{element_id}' not found in page",
            error_data={"element_id": element_id},
            suggestion=(
                f"The page no longer contains '#{element_id}'. "
                "Try the API source instead (--source api)."
            ),
        )
        self.element_id = element_id


class EmptyScriptError(ParseError):
    """The container has no script element, or the script has no text."""

    def __init__(self, element_id: str):
        super().__init__(
            f"No script content found inside '#{element_id}'",
            error_data={"element_id": element_id},
        )
        self.element_id = element_id


class MarkerNotFoundError(ParseError):
    """The variable-assignment marker is absent from the script text."""

    def __init__(self, marker: str, snippet: str | None = None):
        super().__init__(
            f"Marker '{marker.strip()}' not found in script",
            snippet=snippet,
            error_data={"marker": marker},
        )
        self.marker = marker


class MissingFieldError(ParseError):
    """A required field is absent or has the wrong type on some entry."""

    def __init__(self, field: str, index: int | None = None, received: Any = None):
        super().__init__(
            f"Missing or invalid field '{field}'"
            + (f" in entry {index}" if index is not None else ""),
            field=field,
            error_data={
                "index": index,
                "received": str(received)[:200] if received is not None else None,
            },
        )
        self.index = index


class MalformedJsonError(ParseError):
    """The payload (or the embedded array) is not the expected JSON shape."""

    def __init__(self, message: str, snippet: str | None = None):
        super().__init__(message, snippet=snippet)


# --- Fetching ---


class FetchError(CubeSniperError):
    """Retrieving listings from upstream failed."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        data = error_data or {}
        data.update({"url": url})
        super().__init__(message, data, suggestion)
        self.url = url


class TransportError(FetchError):
    """HTTP/connection failure. Never retried.

    Examples:
        - Connection timeout
        - HTTP 4xx/5xx status
        - DNS resolution failures
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize transport error.

        Args:
            message: Human-readable error message.
            url: The URL that failed.
            status_code: HTTP status code if applicable.
        """
        super().__init__(
            message,
            url=url,
            error_data={"status_code": status_code},
            suggestion=(
                "Check network connectivity and the region identifier, "
                "then run the command again."
            ),
        )
        self.status_code = status_code


class MissingPaginationSignalError(FetchError):
    """A page response carried no usable Link header."""

    def __init__(self, url: str | None = None, header: str | None = None):
        super().__init__(
            "Response is missing a pagination Link header",
            url=url,
            error_data={"header": header},
            suggestion="The API may have changed how it paginates results.",
        )


# --- Input ---


class ConfigurationError(CubeSniperError):
    """Invalid configuration or CLI arguments.

    Examples:
        - Location not in "lat,lon" form
        - Latitude or longitude that is not a number
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        expected_format: str | None = None,
        example: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Human-readable error message.
            parameter: Parameter name that's invalid.
            expected_format: Expected format for the parameter.
            example: Example of valid value.
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update(
            {
                "parameter": parameter,
                "expected_format": expected_format,
                "example": example,
            }
        )

        default_suggestion = suggestion or (
            f"Parameter '{parameter}' must be in format: {expected_format}. "
            f"Example: {example}"
            if parameter and expected_format and example
            else "Check the command-line arguments."
        )

        super().__init__(message, data, default_suggestion)
        self.parameter = parameter
        self.expected_format = expected_format
        self.example = example
