"""
METAR Scraper - Versioned archival of METAR/SPECI bulletins.

Fetches station web pages, extracts each station's bulletin with a
station-specific rule, validates it, and archives new reports to a flat
directory without ever duplicating an unchanged one.
"""

__version__ = "0.1.0"

from metar_scraper.core import (
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
    # Errors
    MetarScraperError,
    ConfigurationError,
    StationError,
)

from metar_scraper.engine import (
    ScrapePipeline,
    run_pipeline,
)

__all__ = [
    # Version
    "__version__",
    # Enums
    "ResultStatus",
    "ArchiveOutcome",
    # Data classes
    "StationSource",
    "RunConfig",
    "Bulletin",
    "ArchivedFile",
    "StationResult",
    "RunSummary",
    # Errors
    "MetarScraperError",
    "ConfigurationError",
    "StationError",
    # Pipeline
    "ScrapePipeline",
    "run_pipeline",
]
