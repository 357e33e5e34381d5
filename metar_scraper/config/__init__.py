"""
Configuration module for METAR Scraper.

Station list loading lives in metar_scraper.config.stations.
"""

from metar_scraper.config.settings import (
    # Fetch Settings
    FETCH_TIMEOUT,
    USER_AGENT,
    ALLOWED_URL_SCHEMES,
    # Archive Format
    COMMON_NAME_PREFIX,
    START_OF_HEADING,
    ROUTING_LINE,
    BULLETIN_TERMINATOR,
    ARCHIVE_ENCODING,
    # Notifications
    MAIL_SUBJECT,
    MAIL_FROM,
    MAIL_TO,
    MAIL_SERVER,
    SMTP_PORT,
    SMTP_TIMEOUT,
    # Logging
    LOG_LEVEL,
    LOG_FORMAT,
)

__all__ = [
    # Fetch Settings
    "FETCH_TIMEOUT",
    "USER_AGENT",
    "ALLOWED_URL_SCHEMES",
    # Archive Format
    "COMMON_NAME_PREFIX",
    "START_OF_HEADING",
    "ROUTING_LINE",
    "BULLETIN_TERMINATOR",
    "ARCHIVE_ENCODING",
    # Notifications
    "MAIL_SUBJECT",
    "MAIL_FROM",
    "MAIL_TO",
    "MAIL_SERVER",
    "SMTP_PORT",
    "SMTP_TIMEOUT",
    # Logging
    "LOG_LEVEL",
    "LOG_FORMAT",
]
