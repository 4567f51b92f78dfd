"""
Data models for the NexMart support-chat intent resolver.
"""

from enum import Enum
from dataclasses import dataclass, asdict
from typing import Optional, Callable, Union


class Intent(Enum):
    # Chit-Chat
    GREETING               = "greeting"
    THANKS                 = "thanks"

    # Promotions
    OFFERS                 = "offers"

    # Account & Ordering
    ORDER_TRACKING         = "order_tracking"
    CART_HELP              = "cart_help"

    # FAQ
    SHIPPING_FAQ           = "shipping_faq"
    RETURNS_FAQ            = "returns_faq"
    PAYMENT_FAQ            = "payment_faq"

    # ──── Category-Based Browsing ────
    CATEGORY_ELECTRONICS   = "category_electronics"
    CATEGORY_FASHION       = "category_fashion"
    CATEGORY_HOME          = "category_home"
    CATEGORY_GAMING        = "category_gaming"

    # Product Discovery
    PRICE_FILTER           = "price_filter"

    # Support
    HELP                   = "help"
    FALLBACK               = "fallback"


class Language(Enum):
    EN = "en"
    HI = "hi"


class OrderStatus(Enum):
    PENDING   = "PENDING"
    SHIPPED   = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class ConversationContext:
    """Projection of client state handed to the resolver on every call."""
    current_route: str = "/"
    is_logged_in: bool = False
    cart_items_count: int = 0
    language: Language = Language.EN

    def __post_init__(self):
        if self.cart_items_count < 0:
            raise ValueError("cart_items_count must be >= 0")

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ConversationContext":
        data = data or {}
        try:
            language = Language(str(data.get("language", "en")).lower())
        except ValueError:
            language = Language.EN
        logged_in = data.get("is_logged_in", False)
        if isinstance(logged_in, str):
            logged_in = logged_in.lower() in ("true", "1", "yes")
        try:
            cart_items_count = max(0, int(data.get("cart_items_count", 0) or 0))
        except OverflowError:
            raise ValueError(f"cart_items_count is not finite: {data.get('cart_items_count')!r}")
        return cls(
            current_route=str(data.get("current_route", "/")),
            is_logged_in=bool(logged_in),
            cart_items_count=cart_items_count,
            language=language,
        )


# ─────────────────────────────────────────────
# CATALOG & ORDERS
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class CatalogProduct:
    id: str
    name: str
    category: str
    price: float
    image_url: str = ""
    rating: Optional[float] = None


@dataclass(frozen=True)
class ProductSummary:
    id: str
    name: str
    price: float
    image_url: str = ""
    rating: Optional[float] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "imageUrl": self.image_url,
        }
        if self.rating is not None:
            data["rating"] = self.rating
        return data


@dataclass(frozen=True)
class OrderItem:
    name: str
    quantity: int


@dataclass(frozen=True)
class Order:
    """Backend order record. Chat replies only ever see its OrderSummary."""
    order_id: str
    status: OrderStatus
    total_amount: float
    items: tuple = ()
    created_date: str = ""
    delivered_date: Optional[str] = None
    shipped_date: Optional[str] = None
    shipping_address: Optional[str] = None
    payment_method: Optional[str] = None


@dataclass(frozen=True)
class OrderSummary:
    order_id: str
    status: OrderStatus
    total_amount: float
    items: tuple = ()
    created_date: str = ""
    delivered_date: Optional[str] = None
    shipped_date: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "orderId": self.order_id,
            "status": self.status.value,
            "totalAmount": self.total_amount,
            "items": [{"name": i.name, "quantity": i.quantity} for i in self.items],
            "createdDate": self.created_date,
        }
        if self.delivered_date:
            data["deliveredDate"] = self.delivered_date
        if self.shipped_date:
            data["shippedDate"] = self.shipped_date
        return data


# ─────────────────────────────────────────────
# BOT RESPONSES
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class HelpLink:
    label_key: str
    href: str

    def to_dict(self) -> dict:
        return {"label": self.label_key, "href": self.href}


@dataclass(frozen=True)
class TextResponse:
    message_key: str

    def to_dict(self) -> dict:
        return {"type": "text", "message": self.message_key}


@dataclass(frozen=True)
class ProductListResponse:
    title_key: str
    products: tuple = ()

    def to_dict(self) -> dict:
        return {
            "type": "product-list",
            "title": self.title_key,
            "products": [p.to_dict() for p in self.products],
        }


@dataclass(frozen=True)
class OrderStatusResponse:
    order: OrderSummary

    def to_dict(self) -> dict:
        return {"type": "order-status", "order": self.order.to_dict()}


@dataclass(frozen=True)
class HelpLinksResponse:
    message_key: str
    items: tuple = ()

    def to_dict(self) -> dict:
        return {
            "type": "help-links",
            "message": self.message_key,
            "items": [i.to_dict() for i in self.items],
        }


# ─────────────────────────────────────────────
# CLASSIFICATION
# ─────────────────────────────────────────────

@dataclass
class ExtractedEntities:
    price_limit: Optional[int] = None      # None = no constraint, 0 is a real limit
    category: Optional[str] = None


@dataclass
class Rule:
    """One precedence slot: a predicate over the lower-cased text and its handler."""
    intent: Intent
    predicate: Callable
    handler: Callable
    category: Optional[str] = None


@dataclass
class ClassifiedResult:
    intent: Intent
    entities: ExtractedEntities
    rule: Optional[Rule] = None
    text: str = ""

    def entities_dict(self) -> dict:
        return {k: v for k, v in asdict(self.entities).items() if v is not None}


BotResponse = Union[TextResponse, ProductListResponse, OrderStatusResponse, HelpLinksResponse]
