"""Utility modules for METAR Scraper."""

from metar_scraper.utils.logging import setup_logging
from metar_scraper.utils.notify import MailNotifier

__all__ = ["setup_logging", "MailNotifier"]
