"""
Tests for bulletin validation module.
"""

import pytest

from metar_scraper.core import Bulletin, MalformedBulletinError
from metar_scraper.engine.validator import (
    is_blank,
    is_single_line,
    is_valid_bulletin,
    validate_bulletin,
)


# =============================================================================
# TEST DATA
# =============================================================================

SOURCE_URL = "http://example.com/cynr.html"

VALID_BULLETINS = [
    "METAR KXYZ 151200Z WIND CALM=",
    "METAR CYNR 151200Z 00000KT 15SM FEW040 M05/M12 A3001 RMK SC1",
    "SPECI CFG6 010059Z 27015G25KT 3SM -SN BKN008",
    "METAR CET2 312359Z",
]

# Grammar-valid except for a line break inside the report
MULTI_LINE_BULLETINS = [
    "METAR\nKXYZ 151200Z WIND CALM",
    "METAR KXYZ\n151200Z WIND CALM",
    "METAR KXYZ 151200Z WIND\rCALM",
    "METAR KXYZ 151200Z WIND\r\nCALM",
    "METAR KXYZ 151200Z WIND\x0bCALM",
    "METAR KXYZ 151200Z WIND\x0cCALM",
    "METAR KXYZ 151200Z WIND\x85CALM",
    "METAR KXYZ 151200Z WIND\u2028CALM",
]


# =============================================================================
# BLANK TEXT TESTS
# =============================================================================


class TestIsBlank:
    """Tests for is_blank function."""

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\t  \r\n"])
    def test_blank_text(self, text):
        assert is_blank(text)

    def test_non_blank_text(self):
        assert not is_blank(" METAR ")


# =============================================================================
# GRAMMAR TESTS
# =============================================================================


class TestIsValidBulletin:
    """Tests for is_valid_bulletin function."""

    @pytest.mark.parametrize("text", VALID_BULLETINS)
    def test_accepts_valid_bulletins(self, text):
        assert is_valid_bulletin(text)

    def test_rejects_missing_report_type(self):
        assert not is_valid_bulletin("KXYZ 151200Z WIND CALM=")

    def test_rejects_unknown_report_type(self):
        assert not is_valid_bulletin("TAF KXYZ 151200Z WIND CALM=")

    def test_report_type_is_case_sensitive(self):
        """Lower-case report type is rejected."""
        assert not is_valid_bulletin("metar KXYZ 151200Z WIND CALM=")

    def test_rejects_three_character_station(self):
        assert not is_valid_bulletin("METAR KXY 151200Z WIND CALM=")

    def test_rejects_five_character_station(self):
        assert not is_valid_bulletin("METAR KXYZA 151200Z WIND CALM=")

    def test_rejects_short_day_time_group(self):
        assert not is_valid_bulletin("METAR KXYZ 15120Z WIND CALM=")

    def test_rejects_day_time_without_z(self):
        assert not is_valid_bulletin("METAR KXYZ 151200 WIND CALM=")

    def test_rejects_non_numeric_day_time(self):
        assert not is_valid_bulletin("METAR KXYZ 15AB00Z WIND CALM=")

    def test_rejects_leading_whitespace(self):
        """Pattern is anchored at the start."""
        assert not is_valid_bulletin("  METAR KXYZ 151200Z WIND CALM=")

    def test_rejects_blank_text(self):
        assert not is_valid_bulletin("   ")
        assert not is_valid_bulletin(None)

    @pytest.mark.parametrize("text", MULTI_LINE_BULLETINS)
    def test_rejects_inner_line_break(self, text):
        assert not is_single_line(text)
        assert not is_valid_bulletin(text)

    def test_surrounding_line_breaks_are_allowed(self):
        assert is_single_line("METAR KXYZ 151200Z WIND CALM=\r\n")
        assert is_valid_bulletin("METAR KXYZ 151200Z WIND CALM=\r\n")


# =============================================================================
# VALIDATE BULLETIN TESTS
# =============================================================================


class TestValidateBulletin:
    """Tests for validate_bulletin function."""

    def test_returns_bulletin(self):
        bulletin = validate_bulletin("METAR KXYZ 151200Z WIND CALM=", url=SOURCE_URL)

        assert isinstance(bulletin, Bulletin)
        assert bulletin.text == "METAR KXYZ 151200Z WIND CALM="

    def test_trailing_newline_is_stripped(self):
        bulletin = validate_bulletin("METAR KXYZ 151200Z WIND CALM=\n", url=SOURCE_URL)
        assert bulletin.text == "METAR KXYZ 151200Z WIND CALM="

    def test_bulletin_tokens(self):
        bulletin = validate_bulletin("SPECI CFG6 010059Z 27015G25KT")

        assert bulletin.report_type == "SPECI"
        assert bulletin.station_id == "CFG6"
        assert bulletin.day_time == "010059"
        assert bulletin.common_name == "SACN61.CFG6"

    def test_malformed_carries_url_and_text(self):
        with pytest.raises(MalformedBulletinError) as exc_info:
            validate_bulletin("Page not found", url=SOURCE_URL)

        assert exc_info.value.url == SOURCE_URL
        assert exc_info.value.text == "Page not found"
        assert SOURCE_URL in str(exc_info.value)

    @pytest.mark.parametrize("text", MULTI_LINE_BULLETINS)
    def test_multi_line_text_is_malformed(self, text):
        with pytest.raises(MalformedBulletinError) as exc_info:
            validate_bulletin(text, url=SOURCE_URL)

        assert exc_info.value.text == text

    def test_day_time_followed_by_remarks_without_space(self):
        """Only the six digits before the Z make up the day-time group."""
        bulletin = validate_bulletin("METAR KXYZ 151200Z00000KT 15SM")

        assert bulletin.day_time == "151200"
        assert bulletin.station_id == "KXYZ"
