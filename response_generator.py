"""
Response generation: one handler per classifier rule.

Every handler has the signature
    handler(result, context, catalog, orders) -> BotResponse
and only reads its inputs. Messages are localization keys; the storefront
resolves them to text.
"""

from typing import List

from models import (
    ClassifiedResult, ConversationContext, CatalogProduct,
    TextResponse, ProductListResponse, OrderStatusResponse, HelpLinksResponse,
)
from catalog import Catalog, OrderBook, to_product_summary
from app_config import MAX_PRODUCTS_PER_REPLY, TOP_DEALS_MIN_RATING
from keyword_registry import (
    CATEGORY_TITLES,
    MSG_GREETING, MSG_THANKS, MSG_TOP_DEALS, MSG_LOGIN_FOR_ORDERS, MSG_NO_ORDERS,
    MSG_EMPTY_CART, MSG_CART_HELP, MSG_FAQ_SHIPPING, MSG_FAQ_RETURNS, MSG_FAQ_PAYMENT,
    MSG_NO_PRODUCTS_IN_RANGE, MSG_PRODUCTS_UNDER_PRICE, MSG_HELP, MSG_FALLBACK,
    LOGIN_LINKS, CART_LINKS, SUPPORT_LINKS, FALLBACK_LINKS,
)


def _product_list(title_key: str, products: List[CatalogProduct]):
    """First N products in catalog order, or the empty-range message."""
    top = products[:MAX_PRODUCTS_PER_REPLY]
    if not top:
        return TextResponse(MSG_NO_PRODUCTS_IN_RANGE)
    return ProductListResponse(
        title_key=title_key,
        products=tuple(to_product_summary(p) for p in top),
    )


# ─────────────────────────────────────────────
# CHIT-CHAT
# ─────────────────────────────────────────────

def greeting_reply(result: ClassifiedResult, context: ConversationContext,
                   catalog: Catalog, orders: OrderBook):
    return TextResponse(MSG_GREETING)


def thanks_reply(result: ClassifiedResult, context: ConversationContext,
                 catalog: Catalog, orders: OrderBook):
    return TextResponse(MSG_THANKS)


# ─────────────────────────────────────────────
# OFFERS & ORDERS
# ─────────────────────────────────────────────

def offers_reply(result: ClassifiedResult, context: ConversationContext,
                 catalog: Catalog, orders: OrderBook):
    """Top-rated products stand in for "deals"; an empty list is still a carousel."""
    deals = catalog.top_rated(TOP_DEALS_MIN_RATING)[:MAX_PRODUCTS_PER_REPLY]
    return ProductListResponse(
        title_key=MSG_TOP_DEALS,
        products=tuple(to_product_summary(p) for p in deals),
    )


def order_tracking_reply(result: ClassifiedResult, context: ConversationContext,
                         catalog: Catalog, orders: OrderBook):
    if not context.is_logged_in:
        return HelpLinksResponse(MSG_LOGIN_FOR_ORDERS, LOGIN_LINKS)

    last_order = orders.most_recent_order()
    if last_order is None:
        return TextResponse(MSG_NO_ORDERS)
    return OrderStatusResponse(last_order)


def cart_reply(result: ClassifiedResult, context: ConversationContext,
               catalog: Catalog, orders: OrderBook):
    if context.cart_items_count == 0:
        return TextResponse(MSG_EMPTY_CART)
    return HelpLinksResponse(MSG_CART_HELP, CART_LINKS)


# ─────────────────────────────────────────────
# FAQ
# ─────────────────────────────────────────────

def shipping_faq_reply(result: ClassifiedResult, context: ConversationContext,
                       catalog: Catalog, orders: OrderBook):
    return TextResponse(MSG_FAQ_SHIPPING)


def returns_faq_reply(result: ClassifiedResult, context: ConversationContext,
                      catalog: Catalog, orders: OrderBook):
    return TextResponse(MSG_FAQ_RETURNS)


def payment_faq_reply(result: ClassifiedResult, context: ConversationContext,
                      catalog: Catalog, orders: OrderBook):
    return TextResponse(MSG_FAQ_PAYMENT)


# ─────────────────────────────────────────────
# PRODUCT DISCOVERY
# ─────────────────────────────────────────────

def category_reply(result: ClassifiedResult, context: ConversationContext,
                   catalog: Catalog, orders: OrderBook):
    category = result.entities.category
    products = catalog.list_by_category(category)
    limit = result.entities.price_limit
    if limit is not None:
        products = catalog.filter_by_max_price(products, limit)
    return _product_list(CATEGORY_TITLES[category], products)


def price_filter_reply(result: ClassifiedResult, context: ConversationContext,
                       catalog: Catalog, orders: OrderBook):
    products = catalog.filter_by_max_price(catalog.all(), result.entities.price_limit)
    return _product_list(MSG_PRODUCTS_UNDER_PRICE, products)


# ─────────────────────────────────────────────
# SUPPORT
# ─────────────────────────────────────────────

def help_reply(result: ClassifiedResult, context: ConversationContext,
               catalog: Catalog, orders: OrderBook):
    return HelpLinksResponse(MSG_HELP, SUPPORT_LINKS)


def fallback_reply(result=None, context=None, catalog=None, orders=None):
    return HelpLinksResponse(MSG_FALLBACK, FALLBACK_LINKS)
