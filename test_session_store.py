"""
Tests for the chat session store lifecycle.
"""

import json
import re
from unittest.mock import patch

from session_store import ChatSessionStore, generate_message_id


class TestMessageIds:

    def test_format(self):
        assert re.fullmatch(r"msg_\d+_[a-z0-9]{9}", generate_message_id())

    def test_unique(self):
        assert len({generate_message_id() for _ in range(50)}) == 50


class TestInMemoryStore:

    def test_unknown_session_shows_welcome(self):
        store = ChatSessionStore()
        messages = store.get_messages("nope")
        assert len(messages) == 1
        assert messages[0]["structured_content"] == {"type": "text", "message": "chat.welcome"}
        assert not store.session_exists("nope")

    def test_record_exchange(self):
        store = ChatSessionStore()
        bot = store.record_exchange("s1", "hi", {"type": "text", "message": "chat.greeting"})
        messages = store.get_messages("s1")

        assert [m["role"] for m in messages] == ["bot", "user", "bot"]
        assert messages[1]["content"] == "hi"
        assert messages[2]["id"] == bot["id"]
        assert store.session_exists("s1")

    def test_sessions_are_isolated(self):
        store = ChatSessionStore()
        store.record_exchange("a", "hi", {"type": "text", "message": "chat.greeting"})
        assert not store.session_exists("b")

    def test_clear_resets_to_welcome(self):
        store = ChatSessionStore()
        store.record_exchange("s1", "hi", {"type": "text", "message": "chat.greeting"})
        assert store.clear("s1") is True
        messages = store.get_messages("s1")
        assert [m["id"] for m in messages] == ["welcome"]

    def test_clear_unknown_session(self):
        assert ChatSessionStore().clear("ghost") is False

    def test_get_messages_returns_copy(self):
        store = ChatSessionStore()
        store.record_exchange("s1", "hi", {"type": "text", "message": "chat.greeting"})
        store.get_messages("s1").clear()
        assert len(store.get_messages("s1")) == 3


class TestPersistence:

    def test_flush_and_hydrate(self, tmp_path):
        path = tmp_path / "history" / "chat.json"
        store = ChatSessionStore(str(path))
        store.record_exchange("s1", "नमस्ते", {"type": "text", "message": "chat.greeting"})

        assert path.exists()
        reloaded = ChatSessionStore(str(path))
        assert reloaded.session_exists("s1")
        assert reloaded.get_messages("s1")[1]["content"] == "नमस्ते"

    def test_failed_flush_keeps_previous_history(self, tmp_path):
        path = tmp_path / "chat.json"
        store = ChatSessionStore(str(path))
        store.record_exchange("s1", "hi", {"type": "text", "message": "chat.greeting"})

        def half_written(data, f, **kwargs):
            f.write('{"s1": [')
            raise OSError("No space left on device")

        with patch("session_store.json.dump", side_effect=half_written):
            store.record_exchange("s2", "thanks", {"type": "text", "message": "chat.thanks"})

        reloaded = ChatSessionStore(str(path))
        assert reloaded.session_exists("s1")
        assert len(reloaded.get_messages("s1")) == 3
        assert not reloaded.session_exists("s2")
        assert list(tmp_path.iterdir()) == [path]

    def test_unserialisable_reply_does_not_raise(self, tmp_path):
        path = tmp_path / "chat.json"
        store = ChatSessionStore(str(path))
        store.record_exchange("s1", "hi", {"type": "text", "message": "chat.greeting"})
        store.record_exchange("s1", "again", {"type": "text", "message": object()})

        reloaded = ChatSessionStore(str(path))
        assert len(reloaded.get_messages("s1")) == 3

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "chat.json"
        path.write_text("{not json", encoding="utf-8")
        store = ChatSessionStore(str(path))
        assert not store.session_exists("s1")

    def test_non_list_entries_are_ignored(self, tmp_path):
        path = tmp_path / "chat.json"
        path.write_text(json.dumps({"good": [], "bad": "oops"}), encoding="utf-8")
        store = ChatSessionStore(str(path))
        assert store.session_exists("good")
        assert not store.session_exists("bad")
