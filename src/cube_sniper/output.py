"""Rendering of distance results for the command line."""

import json
from collections.abc import Iterable

import yaml

from cube_sniper.models import DistanceResult


def format_text(results: Iterable[DistanceResult]) -> str:
    """Renders results as human-readable blocks, one per competition."""
    blocks = []
    for result in results:
        record = result.record
        blocks.append(
            "\n".join(
                [
                    f"Name: {record.name}",
                    f"Date: {record.date_label}",
                    f"Lat Long: ({record.location.latitude}, {record.location.longitude})",
                    f"City: {record.city}",
                    f"URL: {record.detail_url}",
                    f"Distance: {result.distance_miles:.2f} miles",
                ]
            )
            + "\n"
        )
    return "\n".join(blocks)


def format_json(results: Iterable[DistanceResult]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)


def format_yaml(results: Iterable[DistanceResult]) -> str:
    return yaml.safe_dump(
        [r.to_dict() for r in results], allow_unicode=True, sort_keys=False
    )


FORMATTERS = {
    "text": format_text,
    "json": format_json,
    "yaml": format_yaml,
}
