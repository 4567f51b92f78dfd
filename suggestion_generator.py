"""
Canned questions offered as quick chips in the chat widget and as FAQ topics
on the full-page support chat.
"""

from typing import List, Dict

QUICK_QUESTIONS = [
    {"key": "chat.quick.offers",      "question": "Show me today's best offers"},
    {"key": "chat.quick.electronics", "question": "Best deals in electronics"},
    {"key": "chat.quick.returns",     "question": "What is the return policy?"},
    {"key": "chat.quick.trackOrder",  "question": "Track my last order"},
    {"key": "chat.quick.under1000",   "question": "Show products under $100"},
]

FAQ_TOPICS = [
    {"key": "chat.faqTopics.shipping", "icon": "truck",        "question": "What is the shipping policy?"},
    {"key": "chat.faqTopics.returns",  "icon": "rotate-ccw",   "question": "What is the return policy?"},
    {"key": "chat.faqTopics.payment",  "icon": "credit-card",  "question": "What payment methods do you accept?"},
    {"key": "chat.faqTopics.orders",   "icon": "package",      "question": "How can I track my order?"},
]


def generate_suggestions() -> Dict[str, List[Dict]]:
    return {
        "quick_questions": [dict(q) for q in QUICK_QUESTIONS],
        "faq_topics": [dict(t) for t in FAQ_TOPICS],
    }
