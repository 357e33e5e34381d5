"""
Archive file versioning.

Archive files are named <common_name>.<day_time>.<version>, for example
SACN61.CYNR.151200.3. Versions number the bulletins archived for a station
during one calendar day: the first archive of a day is version 1, and each
later archive that day takes the next number.

Files are never modified after they are written, so a file's modification
time is its creation time.
"""

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Tuple

from metar_scraper.core.exceptions import ArchiveIOError
from metar_scraper.core.models import ArchivedFile

logger = logging.getLogger(__name__)

# Versions are positive decimal integers without leading zeros
VERSION_REGEX = re.compile(r"^[1-9]\d*$")


def parse_archive_name(name: str, common_name: str) -> Optional[Tuple[str, int]]:
    """
    Split an archive file name into its day-time and version.

    Args:
        name: File name (no directory)
        common_name: Expected prefix, e.g. "SACN61.CYNR"

    Returns:
        (day_time, version), or None if the name does not belong to
        common_name or its version suffix is not a positive integer
    """
    prefix = f"{common_name}."
    if not name.startswith(prefix):
        return None

    day_time, sep, suffix = name[len(prefix):].rpartition(".")
    if not sep or not day_time or not VERSION_REGEX.match(suffix):
        return None

    return day_time, int(suffix)


def list_archived_files(directory: Path, common_name: str) -> List[ArchivedFile]:
    """
    List the archive files in directory that belong to common_name.

    Files sharing the prefix but with a non-numeric version suffix are
    foreign and left out.

    Raises:
        ArchiveIOError: If the directory cannot be read
    """
    archived = []
    try:
        for entry in Path(directory).iterdir():
            if not entry.name.startswith(common_name) or not entry.is_file():
                continue

            parsed = parse_archive_name(entry.name, common_name)
            if parsed is None:
                logger.debug(f"Ignoring foreign file {entry.name}")
                continue

            day_time, version = parsed
            archived.append(ArchivedFile(
                common_name=common_name,
                day_time=day_time,
                version=version,
                path=entry,
                created=datetime.fromtimestamp(entry.stat().st_mtime),
            ))
    except OSError as e:
        raise ArchiveIOError(f"Unable to list archive directory {directory}: {e}") from e

    return archived


def latest_file(archived: List[ArchivedFile]) -> Optional[ArchivedFile]:
    """Most recently created file; ties on creation time go to the higher version."""
    if not archived:
        return None
    return max(archived, key=lambda f: (f.created, f.version))


def find_previous_file(directory: Path, common_name: str) -> Optional[ArchivedFile]:
    """Most recently created archive file for common_name, or None."""
    return latest_file(list_archived_files(directory, common_name))


def next_version(archived: List[ArchivedFile], today: Optional[date] = None) -> int:
    """
    Version for the next archive, given a station's existing files.

    Only files created on `today` count; if there are none the sequence
    starts again at 1.
    """
    today = today or date.today()
    todays_versions = [f.version for f in archived if f.created.date() == today]
    if not todays_versions:
        return 1
    return max(todays_versions) + 1


def resolve_version(
    directory: Path,
    common_name: str,
    today: Optional[date] = None,
) -> int:
    """
    Version number to assign to a newly extracted bulletin.

    Args:
        directory: Archive directory
        common_name: Station file prefix, e.g. "SACN61.CYNR"
        today: Calendar day to version against (default: local today)

    Returns:
        Positive version number
    """
    return next_version(list_archived_files(directory, common_name), today)
