"""
Application configuration module for the NexMart Support Chat API.
Contains environment variables, constants, and settings.
"""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# Where `pip install` puts data/mock_data.json (see [tool.setuptools.data-files])
INSTALLED_DATA_DIR = Path(sys.prefix) / "share" / "nexmart-chat"


def default_mock_data_path(base_dir: Path = BASE_DIR,
                           installed_dir: Path = INSTALLED_DATA_DIR) -> str:
    """Bundled sample data: the checkout copy if present, else the installed copy."""
    checkout_copy = base_dir / "data" / "mock_data.json"
    if checkout_copy.exists():
        return str(checkout_copy)
    return str(installed_dir / "mock_data.json")


# ═══════════════════════════════════════════
# ENVIRONMENT VARIABLES
# ═══════════════════════════════════════════

PORT = int(os.getenv("PORT", 5009))
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# Storefront backend. Empty means "use the bundled mock data".
NEXMART_API_BASE_URL = os.getenv("NEXMART_API_BASE_URL", "")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", 10))  # seconds
MOCK_DATA_PATH = os.getenv("MOCK_DATA_PATH", default_mock_data_path())

# Chat history persistence. Empty keeps sessions in memory only.
CHAT_HISTORY_PATH = os.getenv("CHAT_HISTORY_PATH", "")

# ═══════════════════════════════════════════
# SIMULATED LATENCY (typing indicator window)
# ═══════════════════════════════════════════

CHAT_MIN_DELAY_MS = int(os.getenv("CHAT_MIN_DELAY_MS", 400))
CHAT_MAX_DELAY_MS = int(os.getenv("CHAT_MAX_DELAY_MS", 800))

# ═══════════════════════════════════════════
# RESOLVER CONSTANTS
# ═══════════════════════════════════════════

MAX_PRODUCTS_PER_REPLY = 4   # carousel size
TOP_DEALS_MIN_RATING = 4.5

# ═══════════════════════════════════════════
# HTTP HEADERS
# ═══════════════════════════════════════════

API_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Content-Type": "application/json",
}
