"""Core data models and exceptions."""

from metar_scraper.core.models import (
    # Enums
    ResultStatus,
    ArchiveOutcome,
    # Data classes
    StationSource,
    RunConfig,
    Bulletin,
    ArchivedFile,
    StationResult,
    RunSummary,
)

from metar_scraper.core.exceptions import (
    MetarScraperError,
    ConfigurationError,
    StationError,
    UnknownStationError,
    InvalidSourceUrlError,
    FetchError,
    EmptyDocumentError,
    MissingNodeError,
    MalformedBulletinError,
    ArchiveIOError,
)

__all__ = [
    "ResultStatus",
    "ArchiveOutcome",
    "StationSource",
    "RunConfig",
    "Bulletin",
    "ArchivedFile",
    "StationResult",
    "RunSummary",
    "MetarScraperError",
    "ConfigurationError",
    "StationError",
    "UnknownStationError",
    "InvalidSourceUrlError",
    "FetchError",
    "EmptyDocumentError",
    "MissingNodeError",
    "MalformedBulletinError",
    "ArchiveIOError",
]
