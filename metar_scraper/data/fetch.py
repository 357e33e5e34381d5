"""
Page retrieval and HTML parsing for METAR Scraper.

Fetches a station's web page and turns it into a navigable document tree
for the extraction rules.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from metar_scraper.config import (
    ALLOWED_URL_SCHEMES,
    FETCH_TIMEOUT,
    USER_AGENT,
)
from metar_scraper.core.exceptions import (
    EmptyDocumentError,
    FetchError,
    InvalidSourceUrlError,
)

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


def validate_source_url(url: str) -> str:
    """
    Ensure a configured URL is an absolute http(s) URL.

    Args:
        url: URL from the station list

    Returns:
        The URL, unchanged

    Raises:
        InvalidSourceUrlError: If the URL is relative or uses another scheme
    """
    parsed = urlparse(url or "")
    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        raise InvalidSourceUrlError(
            f"The system was unable to parse a URL ({url}) in the configuration file.",
            url=url,
        )
    return url


def fetch_page(url: str, timeout: Optional[float] = None) -> str:
    """
    Download a station page.

    Args:
        url: Absolute http(s) URL
        timeout: Request timeout in seconds (default: FETCH_TIMEOUT)

    Returns:
        Page body as text

    Raises:
        InvalidSourceUrlError: If the URL is not absolute http(s)
        FetchError: On network or HTTP errors
        EmptyDocumentError: If the body is blank
    """
    validate_source_url(url)

    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=timeout or FETCH_TIMEOUT,
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

    html = response.text
    if not html or not html.strip():
        raise EmptyDocumentError(
            f"The HTML document returned by a configured URL ({url}) is empty.",
            url=url,
        )

    logger.debug(f"Fetched {len(html)} characters from {url}")
    return html


def parse_document(html: str) -> BeautifulSoup:
    """Parse page markup into a document tree."""
    return BeautifulSoup(html, HTML_PARSER)
