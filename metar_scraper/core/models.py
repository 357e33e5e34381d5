"""
Shared data models for METAR Scraper.

ALL MODULES IMPORT FROM HERE.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from metar_scraper.config.settings import (
    COMMON_NAME_PREFIX,
    MAIL_FROM,
    MAIL_TO,
    MAIL_SERVER,
)


# =============================================================================
# ENUMS
# =============================================================================

class ResultStatus(Enum):
    """Outcome of processing one station."""
    ARCHIVED = "archived"     # A new archive file was written
    UNCHANGED = "unchanged"   # Same report as the last archive, nothing written
    NO_DATA = "no_data"       # Page yielded blank text this cycle
    FAILED = "failed"         # A per-station error occurred


class ArchiveOutcome(Enum):
    """What the archiver did with a candidate file."""
    WRITTEN = "written"       # File created
    EXISTS = "exists"         # Exact file name already on disk
    UNCHANGED = "unchanged"   # Content equals the previous archive


# =============================================================================
# DATA CLASSES - CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class StationSource:
    """A configured web source for one station's bulletins."""
    url: str                       # Page publishing the bulletin
    station_code: str              # e.g., "CYNR" (case-insensitive)


@dataclass(frozen=True)
class RunConfig:
    """
    Everything a single pipeline run needs.

    Passed explicitly into the pipeline so runs never share state.
    """
    sources: List[StationSource]
    output_dir: Path
    mail_from: str = MAIL_FROM
    mail_to: str = MAIL_TO
    mail_server: str = MAIL_SERVER


# =============================================================================
# DATA CLASSES - BULLETINS
# =============================================================================

@dataclass(frozen=True)
class Bulletin:
    """
    A validated METAR/SPECI report.

    Only constructed from text that passed validation, so the first three
    whitespace-delimited tokens are always present and well-formed.
    """
    text: str                      # e.g., "METAR CYNR 151200Z 00000KT ..."

    @property
    def _tokens(self) -> List[str]:
        return self.text.split()

    @property
    def report_type(self) -> str:
        """Report type, METAR or SPECI."""
        return self._tokens[0]

    @property
    def station_id(self) -> str:
        """Four-character station identifier from the report."""
        return self._tokens[1]

    @property
    def day_time(self) -> str:
        """Six-digit day-time group without the Z (e.g., "151200")."""
        # The grammar allows remarks to follow the Z with no space
        return self._tokens[2][:6]

    @property
    def common_name(self) -> str:
        """Archive file prefix shared by every version for this station."""
        return f"{COMMON_NAME_PREFIX}.{self.station_id}"


@dataclass(frozen=True)
class ArchivedFile:
    """An archive file on disk."""
    common_name: str               # e.g., "SACN61.CYNR"
    day_time: str                  # e.g., "151200"
    version: int                   # 1, 2, ...
    path: Path
    created: datetime              # Creation time as reported by the filesystem

    @property
    def file_name(self) -> str:
        return f"{self.common_name}.{self.day_time}.{self.version}"


# =============================================================================
# DATA CLASSES - RESULTS
# =============================================================================

@dataclass
class StationResult:
    """Typed outcome of one station's pipeline."""
    source: StationSource
    status: ResultStatus
    bulletin: Optional[Bulletin] = None
    archived_path: Optional[Path] = None
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.status == ResultStatus.FAILED


@dataclass
class RunSummary:
    """All station results of one run, in configured order."""
    results: List[StationResult] = field(default_factory=list)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def failures(self) -> List[StationResult]:
        return [r for r in self.results if r.failed]

    def count(self, status: ResultStatus) -> int:
        return sum(1 for r in self.results if r.status == status)
