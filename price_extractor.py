"""
Price-ceiling extraction for chat utterances.

"phones under $250" → 250, "below ₹500" → 500, "$300 or less" → 300.
"""

import re
from typing import Optional

# Precedence order matters: "under $300 or less" must resolve via "under".
# [0-9] rather than \d so that only ASCII digit runs are accepted.
PRICE_LIMIT_PATTERNS = [
    re.compile(r"under\s*[₹$]?\s*([0-9]+)", re.IGNORECASE),
    re.compile(r"below\s*[₹$]?\s*([0-9]+)", re.IGNORECASE),
    re.compile(r"less than\s*[₹$]?\s*([0-9]+)", re.IGNORECASE),
    re.compile(r"[₹$]\s*([0-9]+)\s*(or less|and below)", re.IGNORECASE),
]


def extract_price_limit(text: str) -> Optional[int]:
    """Return the first price ceiling found in *text*, or None for "no limit"."""
    for pattern in PRICE_LIMIT_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1), 10)
    return None
