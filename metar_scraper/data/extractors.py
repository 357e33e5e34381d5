"""
Per-station bulletin extraction rules.

Each station publishes its bulletin inside a different page layout. An
extraction rule is any callable that takes a parsed document and returns
the bulletin text. Rules are looked up by station identifier in a fixed
registry; lookup is case-insensitive and exact.
"""

import logging
from typing import Callable, Dict, List, Mapping, Optional

from bs4 import BeautifulSoup, Tag

from metar_scraper.core.exceptions import MissingNodeError, UnknownStationError

logger = logging.getLogger(__name__)

ExtractionRule = Callable[[BeautifulSoup], str]

# id of the element wrapping the bulletin on container-style pages
METAR_CONTAINER_ID = "METAR"


# =============================================================================
# EXTRACTION RULES
# =============================================================================

def extract_after_first_break(document: BeautifulSoup) -> str:
    """
    Text of the node immediately following the first <br> element.

    Used by stations whose page prints the bulletin as the first text block
    after a line break. The text is returned as-is.

    Raises:
        MissingNodeError: If the page has no <br> or nothing follows it
    """
    line_break = document.find("br")
    if line_break is None:
        raise MissingNodeError("No <br> element found in the station page.")

    sibling = line_break.next_sibling
    if sibling is None:
        raise MissingNodeError("No content follows the first <br> element in the station page.")

    if isinstance(sibling, Tag):
        return sibling.get_text()
    return str(sibling)


def extract_metar_container(document: BeautifulSoup) -> str:
    """
    Trimmed text of the element with id="METAR".

    Raises:
        MissingNodeError: If no such element exists
    """
    container = document.find(id=METAR_CONTAINER_ID)
    if container is None:
        raise MissingNodeError(
            f"No element with id '{METAR_CONTAINER_ID}' found in the station page."
        )
    return container.get_text().strip()


# =============================================================================
# RULE REGISTRY
# =============================================================================

# Keys are lower-case station identifiers
EXTRACTION_RULES: Dict[str, ExtractionRule] = {
    "cynr": extract_after_first_break,
    "cet2": extract_after_first_break,
    "cfg6": extract_metar_container,
}


def get_extraction_rule(
    station_code: str,
    rules: Optional[Mapping[str, ExtractionRule]] = None,
) -> ExtractionRule:
    """
    Look up the extraction rule for a station.

    Args:
        station_code: Station identifier (any case)
        rules: Registry to search (default: EXTRACTION_RULES)

    Returns:
        The registered rule

    Raises:
        UnknownStationError: If no rule is registered for the station
    """
    rules = EXTRACTION_RULES if rules is None else rules
    rule = rules.get((station_code or "").lower())
    if rule is None:
        raise UnknownStationError(station_code)
    return rule


def extract_bulletin_text(
    station_code: str,
    document: BeautifulSoup,
    rules: Optional[Mapping[str, ExtractionRule]] = None,
) -> str:
    """Select the station's extraction rule and apply it to the document."""
    rule = get_extraction_rule(station_code, rules)
    logger.debug(f"Extracting {station_code} with {rule.__name__}")
    return rule(document)


def registered_stations() -> List[str]:
    """Return the station identifiers that have an extraction rule."""
    return sorted(code.upper() for code in EXTRACTION_RULES)
