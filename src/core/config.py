"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = PROJECT_ROOT / "data" / "db" / "calendar-requests.db"

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

# Weekday name ("monday".."sunday") or number (0=Monday .. 6=Sunday)
CALENDAR_WEEK_START = os.environ.get("CALENDAR_WEEK_START", "monday")

MONTH_LABEL_FORMAT = "%B %Y"  # e.g., "February 2024"
WEEKDAY_LABEL_FORMAT = "%a"  # e.g., "Mon"

NAV_LINK_TEMPLATE = "?year={year}&month={month}"

# =============================================================================
# API CONFIGURATION
# =============================================================================

CALENDAR_API_KEY = os.environ.get("CALENDAR_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
REQUEST_LOG_ENABLED = os.environ.get("REQUEST_LOG_ENABLED", "true").lower() == "true"
API_VERSION = "1.0.0"
