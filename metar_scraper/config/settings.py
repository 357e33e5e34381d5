"""
Global settings and constants for METAR Scraper.

Fetch parameters, archive file format, and notification defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# =============================================================================
# FETCH SETTINGS
# =============================================================================

FETCH_TIMEOUT = int(os.getenv("FETCH_TIMEOUT", "10"))  # seconds
USER_AGENT = os.getenv(
    "USER_AGENT",
    "MetarScraper/1.0 (+https://github.com/metar-scraper)"
)
ALLOWED_URL_SCHEMES = ("http", "https")


# =============================================================================
# ARCHIVE FORMAT
# =============================================================================

# Archive files are named <COMMON_NAME_PREFIX>.<station>.<dayTime>.<version>
COMMON_NAME_PREFIX = "SACN61"

START_OF_HEADING = "\x01"
ROUTING_LINE = "981 "
BULLETIN_TERMINATOR = "="
ARCHIVE_ENCODING = "utf-8"


# =============================================================================
# NOTIFICATIONS
# =============================================================================

MAIL_SUBJECT = "METAR Scraper Problem Notification"
MAIL_FROM = os.getenv("METAR_MAIL_FROM", "")
MAIL_TO = os.getenv("METAR_MAIL_TO", "")
MAIL_SERVER = os.getenv("METAR_MAIL_SERVER", "")
SMTP_PORT = int(os.getenv("SMTP_PORT", "25"))
SMTP_TIMEOUT = int(os.getenv("SMTP_TIMEOUT", "30"))  # seconds


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
