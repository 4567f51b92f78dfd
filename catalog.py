"""
In-memory catalog and order lookups consumed by the resolver.

Both collaborators hold a read-only snapshot and preserve insertion order in
every listing they return.
"""

from datetime import datetime, timezone
from typing import List, Optional, Iterable

from models import (
    CatalogProduct, ProductSummary, Order, OrderSummary, OrderStatus,
)


def to_product_summary(product: CatalogProduct) -> ProductSummary:
    return ProductSummary(
        id=product.id,
        name=product.name,
        price=product.price,
        image_url=product.image_url,
        rating=product.rating,
    )


def to_order_summary(order: Order) -> OrderSummary:
    return OrderSummary(
        order_id=order.order_id,
        status=order.status,
        total_amount=order.total_amount,
        items=tuple(order.items),
        created_date=order.created_date,
        delivered_date=order.delivered_date,
        shipped_date=order.shipped_date,
    )


def _parse_date(value: str) -> datetime:
    """Parse an ISO date/datetime into naive UTC; unparseable dates sort first."""
    if not value:
        return datetime.min
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return datetime.min
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class Catalog:
    """Product catalog snapshot."""

    def __init__(self, products: Iterable[CatalogProduct] = ()):
        self._products: tuple = tuple(products)

    def __len__(self):
        return len(self._products)

    def all(self) -> List[CatalogProduct]:
        return list(self._products)

    def get(self, product_id: str) -> Optional[CatalogProduct]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def list_by_category(self, category: str) -> List[CatalogProduct]:
        category = category.lower()
        return [p for p in self._products if p.category.lower() == category]

    @staticmethod
    def filter_by_max_price(products: Iterable[CatalogProduct], limit: int) -> List[CatalogProduct]:
        return [p for p in products if p.price <= limit]

    def top_rated(self, min_rating: float) -> List[CatalogProduct]:
        return [p for p in self._products if p.rating is not None and p.rating >= min_rating]

    def categories(self) -> List[str]:
        seen = []
        for product in self._products:
            if product.category not in seen:
                seen.append(product.category)
        return seen


class OrderBook:
    """Order history snapshot for the current session."""

    def __init__(self, orders: Iterable[Order] = ()):
        self._orders: tuple = tuple(orders)

    def __len__(self):
        return len(self._orders)

    def all(self) -> List[Order]:
        return list(self._orders)

    def most_recent_order(self) -> Optional[OrderSummary]:
        """
        Latest non-cancelled order by created_date.

        Ties keep the earlier entry, so the same snapshot always yields the
        same order.
        """
        latest = None
        latest_date = None
        for order in self._orders:
            if order.status == OrderStatus.CANCELLED:
                continue
            created = _parse_date(order.created_date)
            if latest is None or created > latest_date:
                latest, latest_date = order, created
        return to_order_summary(latest) if latest is not None else None
