"""
Deduplicating bulletin archiver.

Writes each new bulletin to the archive directory as a four-line file:

    \\x01
    981
    SACN61 CYNR 151200
    METAR CYNR 151200Z 00000KT 15SM FEW040 M05/M12 A3001=

A file is only written when its exact name is new and its content differs
from the station's most recent archive. Re-running with an unchanged report
therefore never produces a second file.
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from metar_scraper.config import (
    ARCHIVE_ENCODING,
    BULLETIN_TERMINATOR,
    COMMON_NAME_PREFIX,
    ROUTING_LINE,
    START_OF_HEADING,
)
from metar_scraper.core.exceptions import ArchiveIOError
from metar_scraper.core.models import ArchivedFile, ArchiveOutcome, Bulletin
from metar_scraper.engine.versioning import latest_file, list_archived_files, next_version

logger = logging.getLogger(__name__)


def build_archive_lines(bulletin: Bulletin) -> List[str]:
    """The four lines of an archive file for a bulletin."""
    return [
        START_OF_HEADING,
        ROUTING_LINE,
        f"{COMMON_NAME_PREFIX} {bulletin.station_id} {bulletin.day_time} ",
        f"{bulletin.text}{BULLETIN_TERMINATOR}",
    ]


def archive_file_name(bulletin: Bulletin, version: int) -> str:
    return f"{bulletin.common_name}.{bulletin.day_time}.{version}"


def read_archive_lines(path: Path) -> List[str]:
    """
    Read an archive file back as lines.

    Raises:
        ArchiveIOError: If the file cannot be read or decoded
    """
    try:
        # utf-8-sig tolerates a byte-order mark from files written elsewhere
        return Path(path).read_text(encoding=f"{ARCHIVE_ENCODING}-sig").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ArchiveIOError(f"Unable to read previous archive file {path}: {e}") from e


def write_archive_lines(path: Path, lines: List[str]) -> None:
    """
    Create an archive file. Never overwrites an existing file.

    Raises:
        FileExistsError: If the file already exists
        ArchiveIOError: On any other write failure
    """
    try:
        with open(path, "x", encoding=ARCHIVE_ENCODING, newline="\n") as f:
            f.write("\n".join(lines) + "\n")
    except FileExistsError:
        raise
    except OSError as e:
        raise ArchiveIOError(f"Unable to write archive file {path}: {e}") from e


class BulletinArchiver:
    """Versions and writes bulletins into a flat archive directory."""

    def __init__(self, output_dir: Path, today: Optional[date] = None):
        """
        Args:
            output_dir: Existing directory holding the archive files
            today: Calendar day used for versioning (default: local today,
                evaluated on each archive call)
        """
        self.output_dir = Path(output_dir)
        self.today = today

    def resolve(self, bulletin: Bulletin) -> Tuple[int, Optional[ArchivedFile]]:
        """
        Version for a bulletin and the station's most recent archive file.

        Returns:
            (version, previous_file) where previous_file may be None
        """
        archived = list_archived_files(self.output_dir, bulletin.common_name)
        version = next_version(archived, self.today)
        return version, latest_file(archived)

    def store(
        self,
        bulletin: Bulletin,
        version: int,
        previous: Optional[ArchivedFile] = None,
    ) -> Tuple[ArchiveOutcome, Path]:
        """
        Write the bulletin as the given version unless it is a duplicate.

        Args:
            bulletin: Validated bulletin
            version: Version from the resolver
            previous: Station's most recent archive file, if any

        Returns:
            (outcome, candidate_path)

        Raises:
            ArchiveIOError: If the previous file cannot be read or the new
                file cannot be written
        """
        path = self.output_dir / archive_file_name(bulletin, version)

        if path.exists():
            logger.debug(f"{path.name} already exists, nothing to do")
            return ArchiveOutcome.EXISTS, path

        lines = build_archive_lines(bulletin)

        if previous is not None and read_archive_lines(previous.path) == lines:
            logger.debug(f"{bulletin.station_id} unchanged since {previous.file_name}")
            return ArchiveOutcome.UNCHANGED, path

        try:
            write_archive_lines(path, lines)
        except FileExistsError:
            return ArchiveOutcome.EXISTS, path

        logger.info(f"Archived {bulletin.station_id} as {path.name}")
        return ArchiveOutcome.WRITTEN, path

    def archive(self, bulletin: Bulletin) -> Tuple[ArchiveOutcome, Path]:
        """Resolve the next version for a bulletin and store it."""
        version, previous = self.resolve(bulletin)
        return self.store(bulletin, version, previous)
