"""
Station list loading for METAR Scraper.

The station list is a JSON array of objects, one per web source:

    [
        {"url": "http://example.com/cynr.html", "airport": "CYNR"},
        {"url": "http://example.com/cfg6.html", "airport": "CFG6"}
    ]

Keys are matched case-insensitively, so "Url" and "Airport" also load.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from metar_scraper.core.exceptions import ConfigurationError
from metar_scraper.core.models import StationSource

logger = logging.getLogger(__name__)


def _parse_entry(entry: object, index: int) -> StationSource:
    """Turn one JSON object into a StationSource."""
    if not isinstance(entry, dict):
        raise ConfigurationError(
            f"Station entry #{index} must be an object, got {type(entry).__name__}"
        )

    fields = {str(k).lower(): v for k, v in entry.items()}
    url = fields.get("url")
    airport = fields.get("airport")

    if not isinstance(url, str) or not url.strip():
        raise ConfigurationError(f"Station entry #{index} is missing 'url'")
    if not isinstance(airport, str) or not airport.strip():
        raise ConfigurationError(f"Station entry #{index} is missing 'airport'")

    return StationSource(url=url.strip(), station_code=airport.strip())


def parse_station_sources(text: str) -> List[StationSource]:
    """
    Parse the JSON text of a station list.

    Args:
        text: Raw JSON document

    Returns:
        Station sources in configured order

    Raises:
        ConfigurationError: If the document is blank, not valid JSON,
            not a list, contains a bad entry, or lists no stations
    """
    if not text or not text.strip():
        raise ConfigurationError("The configuration file is empty.")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"The configuration file is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ConfigurationError("The configuration file must contain a JSON array of stations.")

    sources = [_parse_entry(entry, i) for i, entry in enumerate(data)]

    if not sources:
        raise ConfigurationError("The configuration file does not list any stations.")

    return sources


def load_station_sources(path: Union[str, Path, None]) -> List[StationSource]:
    """
    Load the station list from a JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        Station sources in configured order

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if path is None or not str(path).strip():
        raise ConfigurationError(
            "You must specify a valid configuration file that specifies the "
            "weather data source URL(s)."
        )

    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(
            "You must specify a valid configuration file that specifies the "
            f"weather data source URL(s). Specified file was: {config_path}"
        )

    try:
        text = config_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Unable to read configuration file {config_path}: {e}") from e

    sources = parse_station_sources(text)
    logger.debug(f"Loaded {len(sources)} station(s) from {config_path}")
    return sources


def resolve_output_dir(path: Union[str, Path, None]) -> Path:
    """
    Validate the archive output directory.

    Raises:
        ConfigurationError: If the path is blank or not an existing directory
    """
    if path is None or not str(path).strip() or not Path(path).is_dir():
        raise ConfigurationError(
            "You must specify a valid path in which to store the weather data "
            f"file(s). Specified path was: {path}"
        )
    return Path(path)
