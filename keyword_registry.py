"""
Registry of chat keywords, message keys and help links for the NexMart store.

Keywords are regex fragments grouped by language. Every language's variants are
matched regardless of the UI language, so adding a language only means adding
a key here.
"""

import re
from typing import Dict, List, Iterable

from models import Intent, Language, HelpLink

# ─── KEYWORD TABLE ───
KEYWORDS: Dict[Intent, Dict[Language, List[str]]] = {
    Intent.GREETING: {
        Language.EN: ["hi", "hello", "hey", r"good\s*(?:morning|afternoon|evening)"],
        Language.HI: ["namaste", "नमस्ते"],
    },
    Intent.THANKS: {
        Language.EN: ["thank", "thanks"],
        Language.HI: ["धन्यवाद"],
    },
    Intent.OFFERS: {
        Language.EN: ["offer", "discount", "deal", "sale", "coupon"],
        Language.HI: ["छूट", "ऑफर"],
    },
    Intent.CART_HELP: {
        Language.EN: ["cart", "checkout", "payment", "pay", "cod"],
        Language.HI: ["कार्ट", "चेकआउट", "भुगतान"],
    },
    Intent.SHIPPING_FAQ: {
        Language.EN: ["shipping", "delivery", "deliver", "time", "arrive"],
        Language.HI: ["डिलीवरी", "शिपिंग"],
    },
    Intent.RETURNS_FAQ: {
        Language.EN: ["warranty", "return", "refund", "exchange", "replace"],
        Language.HI: ["वारंटी", "रिटर्न", "रिफंड"],
    },
    Intent.PAYMENT_FAQ: {
        Language.EN: ["payment method", "upi", "card", "credit", "debit"],
        Language.HI: ["भुगतान विधि"],
    },
    Intent.CATEGORY_ELECTRONICS: {
        Language.EN: ["electronic", "laptop", "phone", "headphone", "watch", "camera", "tv"],
        Language.HI: ["इलेक्ट्रॉनिक"],
    },
    Intent.CATEGORY_FASHION: {
        Language.EN: ["fashion", "cloth", "dress", "shoe", "sneaker", "jacket", "legging", "chino"],
        Language.HI: ["फैशन", "कपड़े"],
    },
    Intent.CATEGORY_HOME: {
        Language.EN: ["home", "living", "vacuum", "chair", "appliance"],
        Language.HI: ["घर"],
    },
    Intent.CATEGORY_GAMING: {
        Language.EN: ["gaming", "playstation", "ps5", "xbox"],
        Language.HI: ["गेमिंग"],
    },
    Intent.HELP: {
        Language.EN: ["help", "support", "contact", "assist"],
        Language.HI: ["मदद", "सपोर्ट"],
    },
}

# Order tracking needs a subject keyword AND a tracking-intent keyword.
ORDER_SUBJECT_KEYWORDS: Dict[Language, List[str]] = {
    Language.EN: ["order", "track", "status"],
    Language.HI: ["ऑर्डर", "ट्रैक"],
}
ORDER_TRACKING_KEYWORDS: Dict[Language, List[str]] = {
    Language.EN: ["track", "status", "where", "last", "recent"],
    Language.HI: ["स्टेटस"],
}

# ─── CATEGORIES ───
CATEGORY_BY_INTENT = {
    Intent.CATEGORY_ELECTRONICS: "electronics",
    Intent.CATEGORY_FASHION:     "fashion",
    Intent.CATEGORY_HOME:        "home",
    Intent.CATEGORY_GAMING:      "gaming",
}

CATEGORY_TITLES = {
    "electronics": "chat.electronicsTitle",
    "fashion":     "chat.fashionTitle",
    "home":        "chat.homeTitle",
    "gaming":      "chat.gamingTitle",
}

# ─── MESSAGE KEYS ───
MSG_GREETING = "chat.greeting"
MSG_THANKS = "chat.thanks"
MSG_TOP_DEALS = "chat.topDeals"
MSG_LOGIN_FOR_ORDERS = "chat.loginForOrders"
MSG_NO_ORDERS = "chat.noOrders"
MSG_EMPTY_CART = "chat.emptyCart"
MSG_CART_HELP = "chat.cartHelp"
MSG_FAQ_SHIPPING = "chat.faq.shipping"
MSG_FAQ_RETURNS = "chat.faq.returns"
MSG_FAQ_PAYMENT = "chat.faq.payment"
MSG_NO_PRODUCTS_IN_RANGE = "chat.noProductsInRange"
MSG_PRODUCTS_UNDER_PRICE = "chat.productsUnderPrice"
MSG_HELP = "chat.helpMessage"
MSG_FALLBACK = "chat.fallback"
MSG_WELCOME = "chat.welcome"
MSG_ERROR = "chat.error"

# ─── HELP LINKS ───
LOGIN_LINKS = (
    HelpLink("chat.loginButton", "/login"),
)

CART_LINKS = (
    HelpLink("cart.checkout", "/checkout"),
    HelpLink("nav.cart", "#cart"),
)

SUPPORT_LINKS = (
    HelpLink("footer.helpCenter", "/support"),
    HelpLink("nav.orders", "/orders"),
    HelpLink("footer.contactUs", "/contact"),
)

FALLBACK_LINKS = (
    HelpLink("nav.products", "/products"),
    HelpLink("footer.helpCenter", "/support"),
    HelpLink("footer.contactUs", "/contact"),
)


def _variants(table: Dict[Language, List[str]]) -> Iterable[str]:
    for language in Language:
        yield from table.get(language, [])


def keyword_pattern(table: Dict[Language, List[str]], anchored: bool = False) -> "re.Pattern":
    """
    Compile a keyword table into one case-insensitive alternation.

    Unanchored patterns match anywhere ("phones" hits "phone").
    Anchored patterns must start the utterance and may not run on into
    another Latin letter, so "history" is not read as "hi".
    """
    alternation = "|".join(f"(?:{v})" for v in _variants(table))
    if anchored:
        return re.compile(rf"^(?:{alternation})(?![a-z])", re.IGNORECASE)
    return re.compile(rf"(?:{alternation})", re.IGNORECASE)
