"""
Bulletin engine for METAR Scraper.

Contains modules for validating bulletins, versioning archive files,
writing deduplicated archives and running the per-station pipeline.
"""

from metar_scraper.engine.validator import (
    BULLETIN_REGEX,
    is_blank,
    is_single_line,
    is_valid_bulletin,
    validate_bulletin,
)

from metar_scraper.engine.versioning import (
    parse_archive_name,
    list_archived_files,
    find_previous_file,
    latest_file,
    next_version,
    resolve_version,
)

from metar_scraper.engine.archiver import (
    BulletinArchiver,
    build_archive_lines,
    archive_file_name,
    read_archive_lines,
    write_archive_lines,
)

from metar_scraper.engine.pipeline import (
    ScrapePipeline,
    run_pipeline,
)

__all__ = [
    # Validator
    "BULLETIN_REGEX",
    "is_blank",
    "is_single_line",
    "is_valid_bulletin",
    "validate_bulletin",
    # Versioning
    "parse_archive_name",
    "list_archived_files",
    "find_previous_file",
    "latest_file",
    "next_version",
    "resolve_version",
    # Archiver
    "BulletinArchiver",
    "build_archive_lines",
    "archive_file_name",
    "read_archive_lines",
    "write_archive_lines",
    # Pipeline
    "ScrapePipeline",
    "run_pipeline",
]
