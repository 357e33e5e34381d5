"""
Bulletin format validation.

A bulletin starts with the report type (METAR or SPECI), a four-character
station identifier and a six-digit day-time group ending in Z, e.g.:

    METAR CYNR 151200Z 00000KT 15SM FEW040 M05/M12 A3001 RMK SC1

The whole report sits on one line. Text with an inner line break of any
kind would split the archived report over several lines and is rejected.
"""

import re
from typing import Optional

from metar_scraper.core.exceptions import MalformedBulletinError
from metar_scraper.core.models import Bulletin

BULLETIN_REGEX = re.compile(r"^(METAR|SPECI)\s\S{4}\s\d{6}Z(.*)$")


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty or whitespace-only text (no data this cycle)."""
    return text is None or not text.strip()


def is_single_line(text: str) -> bool:
    """True if text holds no line break once surrounding whitespace is removed."""
    return len(text.strip().splitlines()) == 1


def is_valid_bulletin(text: Optional[str]) -> bool:
    """Check text against the METAR/SPECI bulletin grammar."""
    if is_blank(text) or not is_single_line(text):
        return False
    return BULLETIN_REGEX.match(text) is not None


def validate_bulletin(text: str, url: Optional[str] = None) -> Bulletin:
    """
    Validate extracted text and wrap it as a Bulletin.

    Callers are expected to skip blank text before calling this; blank text
    means "no data" rather than a malformed bulletin.

    Args:
        text: Text returned by an extraction rule
        url: Source URL, for error reporting

    Returns:
        Bulletin with surrounding whitespace removed

    Raises:
        MalformedBulletinError: If the text does not match the grammar or
            spans more than one line
    """
    if not is_valid_bulletin(text):
        raise MalformedBulletinError(text, url=url)
    return Bulletin(text=text.strip())
