"""
Exception hierarchy for METAR Scraper.

ConfigurationError is fatal for a run. Every StationError is scoped to a
single station and is caught at the per-station boundary of the pipeline.
"""

from typing import Optional


class MetarScraperError(Exception):
    """Base class for all METAR Scraper errors."""


class ConfigurationError(MetarScraperError):
    """Invalid or missing configuration file or output path."""


# =============================================================================
# PER-STATION ERRORS
# =============================================================================

class StationError(MetarScraperError):
    """
    An error confined to one configured station.

    Attributes:
        station_code: Station identifier the error belongs to (if known)
        url: Source URL being processed (if known)
    """

    def __init__(
        self,
        message: str,
        station_code: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.station_code = station_code
        self.url = url


class UnknownStationError(StationError):
    """No extraction rule is registered for the station identifier."""

    def __init__(self, station_code: str):
        super().__init__(
            f"Invalid airport code specified in the configuration file: '{station_code}'",
            station_code=station_code,
        )


class InvalidSourceUrlError(StationError):
    """The configured URL is not an absolute http(s) URL."""


class FetchError(StationError):
    """The page could not be retrieved."""


class EmptyDocumentError(StationError):
    """The page was retrieved but its body is blank."""


class MissingNodeError(StationError):
    """The structural anchor an extraction rule relies on is absent."""


class MalformedBulletinError(StationError):
    """Extracted text does not match the METAR/SPECI bulletin grammar."""

    def __init__(self, text: str, url: Optional[str] = None):
        super().__init__(
            f"Parsed data returned by {url} is an invalid data format: {text}",
            url=url,
        )
        self.text = text


class ArchiveIOError(StationError):
    """Reading or writing an archive file failed."""
