"""Page retrieval and bulletin extraction."""

from metar_scraper.data.fetch import (
    validate_source_url,
    fetch_page,
    parse_document,
)

from metar_scraper.data.extractors import (
    ExtractionRule,
    EXTRACTION_RULES,
    METAR_CONTAINER_ID,
    extract_after_first_break,
    extract_metar_container,
    get_extraction_rule,
    extract_bulletin_text,
    registered_stations,
)

__all__ = [
    # Fetch
    "validate_source_url",
    "fetch_page",
    "parse_document",
    # Extraction
    "ExtractionRule",
    "EXTRACTION_RULES",
    "METAR_CONTAINER_ID",
    "extract_after_first_break",
    "extract_metar_container",
    "get_extraction_rule",
    "extract_bulletin_text",
    "registered_stations",
]
