"""
Pytest configuration and fixtures for nexmart-chat tests.

Provides a small fixed catalog and order history so resolver tests do not
depend on the bundled mock data file.
"""

import pytest

from models import (
    CatalogProduct, Order, OrderItem, OrderStatus, ConversationContext, Language,
)
from catalog import Catalog, OrderBook
from resolver import no_delay


TEST_PRODUCTS = [
    CatalogProduct("e1", "Budget Earbuds", "electronics", 1499, "/img/e1.jpg", 4.6),
    CatalogProduct("e2", "Studio Laptop", "electronics", 72999, "/img/e2.jpg", 4.8),
    CatalogProduct("e3", "Fitness Watch", "electronics", 9999, "/img/e3.jpg", 4.2),
    CatalogProduct("e4", "Smart Phone Lite", "electronics", 14999, "/img/e4.jpg", 4.5),
    CatalogProduct("e5", "Action Camera", "electronics", 15000, "/img/e5.jpg", 4.0),
    CatalogProduct("e6", "Tablet Pro", "electronics", 11999, "/img/e6.jpg", None),
    CatalogProduct("f1", "Denim Jacket", "fashion", 2999, "/img/f1.jpg", 4.7),
    CatalogProduct("f2", "Canvas Sneakers", "fashion", 89, "/img/f2.jpg", 3.9),
    CatalogProduct("h1", "Robot Vacuum", "home", 21999, "/img/h1.jpg", 4.5),
    CatalogProduct("h2", "Desk Chair", "home", 8999, "/img/h2.jpg", 4.1),
    CatalogProduct("g1", "Game Console", "gaming", 49990, "/img/g1.jpg", 4.9),
    CatalogProduct("g2", "Wireless Controller", "gaming", 5390, "/img/g2.jpg", 4.6),
]

ORDER_DELIVERED = Order(
    order_id="ORD-1",
    status=OrderStatus.DELIVERED,
    total_amount=2999,
    items=(OrderItem("Denim Jacket", 1),),
    created_date="2024-10-01T09:00:00Z",
    shipped_date="2024-10-02T09:00:00Z",
    delivered_date="2024-10-05T09:00:00Z",
)

ORDER_SHIPPED = Order(
    order_id="ORD-2",
    status=OrderStatus.SHIPPED,
    total_amount=49990,
    items=(OrderItem("Game Console", 1), OrderItem("Wireless Controller", 2)),
    created_date="2024-11-20T18:30:00Z",
    shipped_date="2024-11-21T12:00:00Z",
    shipping_address="221B Residency Road, Pune 411001",
    payment_method="UPI",
)

ORDER_CANCELLED = Order(
    order_id="ORD-3",
    status=OrderStatus.CANCELLED,
    total_amount=89,
    items=(OrderItem("Canvas Sneakers", 1),),
    created_date="2024-12-01T08:00:00Z",
)


@pytest.fixture
def catalog():
    return Catalog(TEST_PRODUCTS)


@pytest.fixture
def orders():
    # Deliberately not sorted by date
    return OrderBook([ORDER_DELIVERED, ORDER_SHIPPED, ORDER_CANCELLED])


@pytest.fixture
def empty_orders():
    return OrderBook([])


@pytest.fixture
def guest_context():
    return ConversationContext(current_route="/", is_logged_in=False, cart_items_count=0)


@pytest.fixture
def member_context():
    return ConversationContext(current_route="/products", is_logged_in=True, cart_items_count=3)


@pytest.fixture
def hindi_context():
    return ConversationContext(current_route="/", is_logged_in=True, cart_items_count=1,
                               language=Language.HI)


@pytest.fixture
def zero_delay():
    return no_delay
