"""Routes package - Flask blueprints."""

from .chat import chat_bp

__all__ = ["chat_bp"]
