"""
Main entry point: Loads store data → resolves sample utterances → prints replies.

STARTUP FLOW:
  1. Load .env settings
  2. Load catalog + orders (backend if configured, else bundled mock data)
  3. Resolve each utterance with zero latency
"""

import json
from models import ConversationContext, Language
from classifier import classify
from resolver import resolve, no_delay
from store_loader import StoreLoader


def process(utterance: str, context: ConversationContext, loader: StoreLoader):
    """Classify and resolve a single utterance and print results."""
    result = classify(utterance)
    response = resolve(utterance, context, loader.catalog, loader.order_book, delay=no_delay)

    print(f"\n{'━'*70}")
    print(f"💬  \"{utterance}\"")
    print(f"🎯  Intent:     {result.intent.value}")
    entities = result.entities_dict()
    if entities:
        print(f"📦  Entities:   {entities}")
    print(f"🤖  Response:   {json.dumps(response.to_dict(), ensure_ascii=False, indent=2)}")


if __name__ == "__main__":
    loader = StoreLoader().load_all()

    logged_in = ConversationContext(current_route="/", is_logged_in=True, cart_items_count=2)
    guest = ConversationContext(current_route="/", language=Language.HI)

    tests = [
        # ── Chit-chat ──
        ("hi", guest),
        ("नमस्ते", guest),
        ("thanks, show me electronics", logged_in),

        # ── Offers & orders ──
        ("Show me today's best offers", guest),
        ("Track my last order", logged_in),
        ("Track my last order", guest),
        ("checkout", guest),
        ("checkout", logged_in),

        # ── FAQ ──
        ("What is the shipping policy?", guest),
        ("What is the return policy?", guest),
        ("Do you take UPI?", guest),

        # ── Categories ──
        ("electronics under 15000", guest),
        ("show me phones under $250", guest),
        ("sneakers below ₹5000", guest),
        ("robot vacuum for my home", guest),
        ("xbox accessories", guest),

        # ── Price only / support ──
        ("Show products under $100", guest),
        ("I need help", guest),
        ("xyzzy gibberish", guest),
    ]

    for utterance, context in tests:
        process(utterance, context, loader)
