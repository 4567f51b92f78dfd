"""
Intent classifier for the NexMart support chat.

Rules are evaluated top to bottom and the first match wins. Keyword sets
overlap ("order" also shows up in free text that later rules would catch),
so the position of a rule in RULES is part of its meaning.
"""

from models import Intent, ExtractedEntities, ClassifiedResult, Rule
from price_extractor import extract_price_limit
from keyword_registry import (
    KEYWORDS, ORDER_SUBJECT_KEYWORDS, ORDER_TRACKING_KEYWORDS,
    CATEGORY_BY_INTENT, keyword_pattern,
)
import response_generator as replies

# ─── Compiled keyword patterns ───
_GREETING_RE = keyword_pattern(KEYWORDS[Intent.GREETING], anchored=True)
_ORDER_SUBJECT_RE = keyword_pattern(ORDER_SUBJECT_KEYWORDS)
_ORDER_TRACKING_RE = keyword_pattern(ORDER_TRACKING_KEYWORDS)
_PATTERNS = {
    intent: keyword_pattern(table)
    for intent, table in KEYWORDS.items()
    if intent != Intent.GREETING
}


def _contains(intent: Intent):
    pattern = _PATTERNS[intent]

    def predicate(text: str, entities: ExtractedEntities) -> bool:
        return pattern.search(text) is not None

    predicate.__name__ = f"contains_{intent.value}"
    return predicate


def _is_greeting(text: str, entities: ExtractedEntities) -> bool:
    return _GREETING_RE.search(text) is not None


def _is_order_tracking(text: str, entities: ExtractedEntities) -> bool:
    # Both sets are required: "order" alone is not a tracking request.
    return (
        _ORDER_SUBJECT_RE.search(text) is not None
        and _ORDER_TRACKING_RE.search(text) is not None
    )


def _has_price_limit(text: str, entities: ExtractedEntities) -> bool:
    return entities.price_limit is not None


def _always(text: str, entities: ExtractedEntities) -> bool:
    return True


def _category_rule(intent: Intent) -> Rule:
    return Rule(
        intent=intent,
        predicate=_contains(intent),
        handler=replies.category_reply,
        category=CATEGORY_BY_INTENT[intent],
    )


# ═══════════════════════════════════════════
# RULES (priority order)
# ═══════════════════════════════════════════

RULES = [
    Rule(Intent.GREETING,       _is_greeting,                   replies.greeting_reply),
    Rule(Intent.THANKS,         _contains(Intent.THANKS),       replies.thanks_reply),
    Rule(Intent.OFFERS,         _contains(Intent.OFFERS),       replies.offers_reply),
    Rule(Intent.ORDER_TRACKING, _is_order_tracking,             replies.order_tracking_reply),
    Rule(Intent.CART_HELP,      _contains(Intent.CART_HELP),    replies.cart_reply),
    Rule(Intent.SHIPPING_FAQ,   _contains(Intent.SHIPPING_FAQ), replies.shipping_faq_reply),
    Rule(Intent.RETURNS_FAQ,    _contains(Intent.RETURNS_FAQ),  replies.returns_faq_reply),
    Rule(Intent.PAYMENT_FAQ,    _contains(Intent.PAYMENT_FAQ),  replies.payment_faq_reply),
    _category_rule(Intent.CATEGORY_ELECTRONICS),
    _category_rule(Intent.CATEGORY_FASHION),
    _category_rule(Intent.CATEGORY_HOME),
    _category_rule(Intent.CATEGORY_GAMING),
    Rule(Intent.PRICE_FILTER,   _has_price_limit,               replies.price_filter_reply),
    Rule(Intent.HELP,           _contains(Intent.HELP),         replies.help_reply),
    Rule(Intent.FALLBACK,       _always,                        replies.fallback_reply),
]


def classify(utterance: str, rules=None) -> ClassifiedResult:
    """Classify a user utterance into the first matching rule."""
    text = utterance.lower().strip()
    entities = ExtractedEntities(price_limit=extract_price_limit(text))

    for rule in rules if rules is not None else RULES:
        if rule.predicate(text, entities):
            entities.category = rule.category
            return ClassifiedResult(
                intent=rule.intent,
                entities=entities,
                rule=rule,
                text=text,
            )

    # Only reachable with a custom rule list that has no catch-all.
    return ClassifiedResult(
        intent=Intent.FALLBACK,
        entities=entities,
        rule=RULES[-1],
        text=text,
    )
