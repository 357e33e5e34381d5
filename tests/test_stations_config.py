"""
Tests for station list loading.
"""

import json

import pytest

from metar_scraper.config.stations import (
    load_station_sources,
    parse_station_sources,
    resolve_output_dir,
)
from metar_scraper.core import ConfigurationError, StationSource


# =============================================================================
# TEST DATA
# =============================================================================

STATIONS = [
    {"url": "http://weather.example.com/cynr.html", "airport": "CYNR"},
    {"url": "http://weather.example.com/cfg6.html", "airport": "cfg6"},
]


# =============================================================================
# PARSING TESTS
# =============================================================================


class TestParseStationSources:
    """Tests for parse_station_sources function."""

    def test_parse_in_order(self):
        sources = parse_station_sources(json.dumps(STATIONS))

        assert sources == [
            StationSource(url="http://weather.example.com/cynr.html", station_code="CYNR"),
            StationSource(url="http://weather.example.com/cfg6.html", station_code="cfg6"),
        ]

    def test_keys_are_case_insensitive(self):
        text = json.dumps([{"Url": "http://weather.example.com/cet2.html", "Airport": "CET2"}])

        sources = parse_station_sources(text)

        assert sources[0].station_code == "CET2"
        assert sources[0].url == "http://weather.example.com/cet2.html"

    def test_values_are_trimmed(self):
        text = json.dumps([{"url": " http://weather.example.com/a ", "airport": " CYNR "}])
        assert parse_station_sources(text)[0] == StationSource("http://weather.example.com/a", "CYNR")

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_blank_document(self, text):
        with pytest.raises(ConfigurationError):
            parse_station_sources(text)

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError):
            parse_station_sources("[{url: }")

    def test_not_a_list(self):
        with pytest.raises(ConfigurationError):
            parse_station_sources(json.dumps(STATIONS[0]))

    def test_empty_list(self):
        with pytest.raises(ConfigurationError):
            parse_station_sources("[]")

    def test_entry_not_an_object(self):
        with pytest.raises(ConfigurationError):
            parse_station_sources(json.dumps(["http://weather.example.com/cynr.html"]))

    def test_missing_url(self):
        with pytest.raises(ConfigurationError, match="url"):
            parse_station_sources(json.dumps([{"airport": "CYNR"}]))

    def test_missing_airport(self):
        with pytest.raises(ConfigurationError, match="airport"):
            parse_station_sources(json.dumps([{"url": "http://weather.example.com/"}]))


# =============================================================================
# FILE LOADING TESTS
# =============================================================================


class TestLoadStationSources:
    """Tests for load_station_sources function."""

    def test_load_file(self, tmp_path):
        config_file = tmp_path / "stations.json"
        config_file.write_text(json.dumps(STATIONS))

        sources = load_station_sources(config_file)

        assert [s.station_code for s in sources] == ["CYNR", "cfg6"]

    def test_load_file_with_byte_order_mark(self, tmp_path):
        config_file = tmp_path / "stations.json"
        config_file.write_bytes(b"\xef\xbb\xbf" + json.dumps(STATIONS).encode("utf-8"))

        assert len(load_station_sources(str(config_file))) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="configuration file"):
            load_station_sources(tmp_path / "missing.json")

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_station_sources(tmp_path)

    @pytest.mark.parametrize("path", [None, "", "  "])
    def test_no_path(self, path):
        with pytest.raises(ConfigurationError):
            load_station_sources(path)


# =============================================================================
# OUTPUT DIRECTORY TESTS
# =============================================================================


class TestResolveOutputDir:
    """Tests for resolve_output_dir function."""

    def test_existing_directory(self, tmp_path):
        assert resolve_output_dir(str(tmp_path)) == tmp_path

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigurationError, match="valid path"):
            resolve_output_dir(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(ConfigurationError):
            resolve_output_dir(path)

    @pytest.mark.parametrize("path", [None, ""])
    def test_no_path(self, path):
        with pytest.raises(ConfigurationError):
            resolve_output_dir(path)
