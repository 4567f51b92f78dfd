"""
chat_logger.py - logging for the NexMart support chat.

Every record goes to two places:
- logs/<YYYY-MM-DD>/chat.txt, one folder per day, at DEBUG
- stderr, at LOG_LEVEL

User text passes through sanitize_log_string() / clip_message() first.
"""

import logging
from datetime import datetime
from pathlib import Path

from app_config import LOG_LEVEL, LOG_DIR

LOGGER_NAME = "nexmart_chat"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOGGED_MESSAGE = 100


def sanitize_log_string(text: str) -> str:
    """Flatten control characters so one chat message stays one log line."""
    if not text:
        return text
    return "".join(ch if ch >= " " else " " for ch in text)


def clip_message(text: str, limit: int = MAX_LOGGED_MESSAGE) -> str:
    """Sanitize and truncate a user message for a log line."""
    text = sanitize_log_string(text or "")
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class MillisecondFormatter(logging.Formatter):
    """strftime has no millisecond directive, so it is appended here."""

    def formatTime(self, record, datefmt=None):
        if not datefmt:
            return super().formatTime(record, datefmt)
        stamp = datetime.fromtimestamp(record.created).strftime(datefmt)
        return f"{stamp}.{int(record.msecs):03d}"


def daily_log_file(log_root, day: datetime = None) -> Path:
    day = day or datetime.now()
    folder = Path(log_root) / day.strftime("%Y-%m-%d")
    folder.mkdir(parents=True, exist_ok=True)
    return folder / "chat.txt"


def setup_logger(name: str = LOGGER_NAME, log_level: str = LOG_LEVEL,
                 log_root: str = LOG_DIR) -> logging.Logger:
    logger = logging.getLogger(name)
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logger.setLevel(min(level, logging.DEBUG))

    # Already configured by an earlier import
    if logger.handlers:
        return logger

    formatter = MillisecondFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = logging.FileHandler(daily_log_file(log_root), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        setup_logger(name)
    return logger
