"""
Scrape pipeline.

Runs every configured station through fetch, extraction, validation and
archival, one station at a time. A station that fails is logged, reported
by mail and recorded as a failed result; the remaining stations still run.
"""

import logging
from datetime import date, datetime
from typing import Callable, Mapping, Optional

from bs4 import BeautifulSoup

from metar_scraper.core.exceptions import StationError
from metar_scraper.core.models import (
    ArchiveOutcome,
    ResultStatus,
    RunConfig,
    RunSummary,
    StationResult,
    StationSource,
)
from metar_scraper.data.extractors import ExtractionRule, extract_bulletin_text
from metar_scraper.data.fetch import fetch_page, parse_document
from metar_scraper.engine.archiver import BulletinArchiver
from metar_scraper.engine.validator import is_blank, validate_bulletin
from metar_scraper.utils.notify import MailNotifier

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str], str]


class ScrapePipeline:
    """
    Main pipeline controller.
    """

    def __init__(
        self,
        config: RunConfig,
        notifier: Optional[MailNotifier] = None,
        fetcher: PageFetcher = fetch_page,
        rules: Optional[Mapping[str, ExtractionRule]] = None,
        today: Optional[date] = None,
    ):
        """
        Args:
            config: Stations, output directory and mail settings
            notifier: Failure notifier (default: built from config)
            fetcher: Callable returning a page body for a URL
            rules: Extraction rule registry (default: built-in rules)
            today: Calendar day for versioning (default: local today)
        """
        self.config = config
        self.notifier = notifier or MailNotifier(
            config.mail_from, config.mail_to, config.mail_server
        )
        self.fetcher = fetcher
        self.rules = rules
        self.archiver = BulletinArchiver(config.output_dir, today=today)

    def load_document(self, source: StationSource) -> BeautifulSoup:
        """Fetch and parse a station's page."""
        return parse_document(self.fetcher(source.url))

    def process_station(self, source: StationSource) -> StationResult:
        """
        Run one station through the pipeline.

        Never raises; failures are returned as a FAILED result.
        """
        try:
            document = self.load_document(source)
            text = extract_bulletin_text(source.station_code, document, self.rules)

            if is_blank(text):
                logger.debug(f"No data for {source.station_code} this cycle")
                return StationResult(source=source, status=ResultStatus.NO_DATA)

            bulletin = validate_bulletin(text, url=source.url)
            outcome, path = self.archiver.archive(bulletin)

        except StationError as e:
            e.station_code = e.station_code or source.station_code
            e.url = e.url or source.url
            self.report_failure(source, e)
            return StationResult(source=source, status=ResultStatus.FAILED, error=e)
        except Exception as e:
            self.report_failure(source, e)
            return StationResult(source=source, status=ResultStatus.FAILED, error=e)

        if outcome == ArchiveOutcome.WRITTEN:
            return StationResult(
                source=source,
                status=ResultStatus.ARCHIVED,
                bulletin=bulletin,
                archived_path=path,
            )
        return StationResult(source=source, status=ResultStatus.UNCHANGED, bulletin=bulletin)

    def report_failure(self, source: StationSource, error: Exception) -> None:
        """Log a station failure and pass it to the notifier."""
        logger.error(
            f"{source.station_code} ({source.url}) failed: {error}",
            exc_info=error,
        )
        self.notifier.send(str(error))

    def run(self) -> RunSummary:
        """Process every configured station in order."""
        summary = RunSummary(started_at=datetime.now())

        for source in self.config.sources:
            summary.results.append(self.process_station(source))

        summary.finished_at = datetime.now()
        logger.info(
            f"Run complete: {summary.count(ResultStatus.ARCHIVED)} archived, "
            f"{summary.count(ResultStatus.UNCHANGED)} unchanged, "
            f"{summary.count(ResultStatus.NO_DATA)} no data, "
            f"{len(summary.failures)} failed"
        )
        return summary


def run_pipeline(config: RunConfig, notifier: Optional[MailNotifier] = None) -> RunSummary:
    """Convenience function to run every station once."""
    pipeline = ScrapePipeline(config, notifier=notifier)
    return pipeline.run()
