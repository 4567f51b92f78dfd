"""
Chat endpoints as a Flask Blueprint.

The blueprint reads its collaborators from app.config:
    CHAT_CATALOG, CHAT_ORDERS, CHAT_SESSIONS, CHAT_DELAY
"""

import time
from datetime import datetime, timezone

from flask import Blueprint, request, jsonify, current_app

from models import ConversationContext
from resolver import resolve_detailed
from suggestion_generator import generate_suggestions
from keyword_registry import MSG_ERROR
from chat_logger import get_logger, clip_message

logger = get_logger("nexmart_chat")

chat_bp = Blueprint("chat", __name__)


def _error_body(message_key: str, session_id: str, error: str) -> dict:
    return {
        "success": False,
        "intent": "error",
        "response": {"type": "text", "message": message_key},
        "session_id": session_id,
        "metadata": {"error": error},
    }


@chat_bp.route("/chat", methods=["POST"])
def chat():
    """
    Main chat endpoint.

    Request:
        POST /chat
        {
            "message": "electronics under 15000",
            "session_id": "session_xxx",
            "context": {
                "current_route": "/products",
                "is_logged_in": true,
                "cart_items_count": 2,
                "language": "en"
            }
        }

    Response:
        {
            "success": true,
            "intent": "category_electronics",
            "response": {"type": "product-list", "title": "...", "products": [...]},
            "session_id": "...",
            "metadata": {"response_time_ms": 512, "message_id": "..."}
        }
    """
    start_time = time.time()

    # ─── Parse request ───
    body = request.get_json(silent=True)
    if not body or not isinstance(body, dict):
        logger.warning("POST /chat | Invalid JSON body")
        return jsonify(_error_body(MSG_ERROR, "", "Invalid JSON body")), 400

    message = str(body.get("message") or "").strip()
    session_id = str(body.get("session_id") or "")
    raw_context = body.get("context") or {}

    sanitized_msg = clip_message(message)
    logger.info(f'POST /chat | session={session_id} | message="{sanitized_msg}"')

    # Blank input never reaches the resolver.
    if not message:
        logger.warning(f"POST /chat | session={session_id} | Empty message")
        return jsonify(_error_body(MSG_ERROR, session_id, "Empty message")), 400

    try:
        context = ConversationContext.from_dict(raw_context if isinstance(raw_context, dict) else {})
    except (TypeError, ValueError) as e:
        logger.warning(f"POST /chat | session={session_id} | Invalid context: {e}")
        return jsonify(_error_body(MSG_ERROR, session_id, f"Invalid context: {e}")), 400

    try:
        intent, response = resolve_detailed(
            message,
            context,
            current_app.config["CHAT_CATALOG"],
            current_app.config["CHAT_ORDERS"],
            delay=current_app.config.get("CHAT_DELAY"),
        )
        response_dict = response.to_dict()

        message_id = None
        if session_id:
            bot_message = current_app.config["CHAT_SESSIONS"].record_exchange(
                session_id, message, response_dict
            )
            message_id = bot_message["id"]
    except Exception as e:
        logger.error(f"POST /chat | session={session_id} | Unexpected error: {e}", exc_info=True)
        return jsonify(_error_body(MSG_ERROR, session_id, "Internal error")), 500

    response_time_ms = int((time.time() - start_time) * 1000)
    logger.info(
        f"Response sent | session={session_id} | intent={intent.value} | "
        f"type={response_dict['type']} | response_time_ms={response_time_ms}"
    )

    return jsonify({
        "success": True,
        "intent": intent.value,
        "response": response_dict,
        "session_id": session_id,
        "metadata": {
            "response_time_ms": response_time_ms,
            "message_id": message_id,
            "language": context.language.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }), 200


@chat_bp.route("/chat/suggestions", methods=["GET"])
def suggestions():
    """Quick chips and FAQ topics."""
    return jsonify(generate_suggestions())


@chat_bp.route("/session/<session_id>", methods=["GET"])
def get_session(session_id):
    """Get session history."""
    store = current_app.config["CHAT_SESSIONS"]
    if store.session_exists(session_id):
        return jsonify({"session_id": session_id, "messages": store.get_messages(session_id)})
    return jsonify({"error": "Session not found"}), 404


@chat_bp.route("/session/<session_id>", methods=["DELETE"])
def clear_session(session_id):
    """Reset session history to the welcome message."""
    store = current_app.config["CHAT_SESSIONS"]
    if not store.clear(session_id):
        return jsonify({"error": "Session not found"}), 404
    logger.info(f"Session cleared | session={session_id}")
    return jsonify({"session_id": session_id, "messages": store.get_messages(session_id)})
