"""
NexMart Support Chat API Backend
Runs on port 5009 with /chat endpoint.

Usage:
    python server.py

Endpoints:
    POST   http://localhost:5009/chat
    GET    http://localhost:5009/chat/suggestions
    GET    http://localhost:5009/session/<session_id>
    DELETE http://localhost:5009/session/<session_id>
    GET    http://localhost:5009/health
"""

from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS

from store_loader import StoreLoader
from session_store import ChatSessionStore
from resolver import random_delay
from routes.chat import chat_bp
from app_config import PORT, DEBUG, CHAT_HISTORY_PATH
from chat_logger import get_logger

logger = get_logger("nexmart_chat")


def create_app(loader: StoreLoader = None, sessions: ChatSessionStore = None,
               delay=None) -> Flask:
    """Build the Flask app with its catalog, order and session collaborators."""
    if loader is None:
        loader = StoreLoader().load_all()
    if sessions is None:
        sessions = ChatSessionStore(CHAT_HISTORY_PATH or None)

    app = Flask(__name__)
    CORS(app)

    app.config["CHAT_CATALOG"] = loader.catalog
    app.config["CHAT_ORDERS"] = loader.order_book
    app.config["CHAT_SESSIONS"] = sessions
    app.config["CHAT_DELAY"] = delay if delay is not None else random_delay()
    app.config["STORE_SOURCE"] = loader.source

    app.register_blueprint(chat_bp)

    @app.route("/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "store": {
                "source": app.config["STORE_SOURCE"],
                "products_loaded": len(app.config["CHAT_CATALOG"]),
                "orders_loaded": len(app.config["CHAT_ORDERS"]),
            },
        })

    return app


if __name__ == "__main__":
    print("=" * 60)
    print("  NexMart Support Chat API Server")
    print("=" * 60)
    print()

    app = create_app()

    print(f"🚀 Starting server on http://localhost:{PORT}")
    print(f"   POST http://localhost:{PORT}/chat")
    print(f"   GET  http://localhost:{PORT}/health")
    print()

    app.run(
        host="0.0.0.0",
        port=PORT,
        debug=DEBUG,
    )
