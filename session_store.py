"""
Chat session store.

Each session starts with the welcome message, grows by one user and one bot
message per exchange, and is reset to the welcome message on clear. When a
persistence path is given, sessions are hydrated from and flushed to a JSON
file.
"""

import json
import os
import random
import string
import tempfile
import threading
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from keyword_registry import MSG_WELCOME
from chat_logger import get_logger

logger = get_logger("nexmart_chat")


def generate_message_id() -> str:
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"msg_{int(time.time() * 1000)}_{suffix}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def welcome_message() -> Dict:
    return {
        "id": "welcome",
        "role": "bot",
        "content": "",
        "structured_content": {"type": "text", "message": MSG_WELCOME},
        "timestamp": _now_iso(),
    }


class ChatSessionStore:
    """In-memory session history, optionally backed by a JSON file."""

    def __init__(self, persist_path: Optional[str] = None):
        self.persist_path = Path(persist_path) if persist_path else None
        self._sessions: Dict[str, List[Dict]] = {}
        self._lock = threading.Lock()
        self._hydrate()

    # ─── Lifecycle ───

    def _hydrate(self):
        if not self.persist_path or not self.persist_path.exists():
            return
        try:
            with open(self.persist_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not hydrate chat history | path={self.persist_path} | error={e}")
            return
        if isinstance(data, dict):
            self._sessions = {str(k): list(v) for k, v in data.items() if isinstance(v, list)}
            logger.info(f"Chat history hydrated | sessions={len(self._sessions)}")

    def _flush(self):
        """Write to a sibling temp file, then swap it in; the old file survives a failed dump."""
        if not self.persist_path:
            return
        tmp_name = None
        try:
            self.persist_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.persist_path.name}.", suffix=".tmp",
                dir=self.persist_path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._sessions, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.persist_path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Could not persist chat history | path={self.persist_path} | error={e}")
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    # ─── Access ───

    def session_exists(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def get_messages(self, session_id: str) -> List[Dict]:
        """Messages for a session; unknown sessions return the welcome message only."""
        with self._lock:
            messages = self._sessions.get(session_id)
            return list(messages) if messages else [welcome_message()]

    def record_exchange(self, session_id: str, user_text: str, bot_response: Dict) -> Dict:
        """Append a user message and the bot reply; returns the bot message."""
        user_message = {
            "id": generate_message_id(),
            "role": "user",
            "content": user_text,
            "timestamp": _now_iso(),
        }
        bot_message = {
            "id": generate_message_id(),
            "role": "bot",
            "content": "",
            "structured_content": bot_response,
            "timestamp": _now_iso(),
        }
        with self._lock:
            history = self._sessions.setdefault(session_id, [welcome_message()])
            history.append(user_message)
            history.append(bot_message)
            self._flush()
        return bot_message

    def clear(self, session_id: str) -> bool:
        """Reset a session to the welcome message. Returns False for unknown sessions."""
        with self._lock:
            if session_id not in self._sessions:
                return False
            self._sessions[session_id] = [welcome_message()]
            self._flush()
            return True
