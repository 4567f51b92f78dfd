"""
Store Loader: builds the catalog and order snapshots the chat answers from.

Source order:
  1. NEXMART_API_BASE_URL set → GET {base}/products and GET {base}/orders
  2. otherwise, or if the backend is unreachable → bundled mock_data.json
"""

import json
from pathlib import Path
from typing import List, Dict, Optional

import requests

from models import CatalogProduct, Order, OrderItem, OrderStatus
from catalog import Catalog, OrderBook
from app_config import NEXMART_API_BASE_URL, REQUEST_TIMEOUT, MOCK_DATA_PATH, API_HEADERS
from chat_logger import get_logger

logger = get_logger("nexmart_chat")


def parse_product(raw: Dict) -> CatalogProduct:
    rating = raw.get("rating")
    return CatalogProduct(
        id=str(raw["id"]),
        name=raw.get("name", ""),
        category=str(raw.get("category", "")).lower(),
        price=float(raw.get("price", 0)),
        image_url=raw.get("imageUrl", raw.get("image_url", "")),
        rating=float(rating) if rating is not None else None,
    )


def parse_order(raw: Dict) -> Order:
    items = tuple(
        OrderItem(name=i.get("name", ""), quantity=int(i.get("quantity", 0)))
        for i in raw.get("items", [])
    )
    return Order(
        order_id=str(raw.get("orderId", raw.get("id", ""))),
        status=OrderStatus(str(raw.get("status", "PENDING")).upper()),
        total_amount=float(raw.get("totalAmount", 0)),
        items=items,
        created_date=raw.get("createdDate", ""),
        delivered_date=raw.get("deliveredDate"),
        shipped_date=raw.get("shippedDate"),
        shipping_address=raw.get("shippingAddress"),
        payment_method=raw.get("paymentMethod"),
    )


class StoreLoader:
    """Fetches and caches product and order data."""

    def __init__(self, base_url: str = NEXMART_API_BASE_URL,
                 mock_data_path: str = MOCK_DATA_PATH,
                 timeout: int = REQUEST_TIMEOUT):
        self.base = base_url.rstrip("/")
        self.mock_data_path = Path(mock_data_path)
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update(API_HEADERS)

        # Populated after load_all()
        self.products: List[CatalogProduct] = []
        self.orders: List[Order] = []
        self.source: Optional[str] = None

    @property
    def catalog(self) -> Catalog:
        return Catalog(self.products)

    @property
    def order_book(self) -> OrderBook:
        return OrderBook(self.orders)

    def load_all(self) -> "StoreLoader":
        """Load products and orders from the backend, falling back to mock data."""
        if self.base:
            try:
                self._load_remote()
                self.source = self.base
                logger.info(
                    f"Store data loaded from backend | base={self.base} | "
                    f"products={len(self.products)} | orders={len(self.orders)}"
                )
                return self
            except (requests.RequestException, ValueError, KeyError, TypeError) as e:
                logger.error(f"Store backend unavailable, using mock data | base={self.base} | error={e}")

        self._load_mock()
        self.source = str(self.mock_data_path)
        logger.info(
            f"Store data loaded from mock file | path={self.mock_data_path} | "
            f"products={len(self.products)} | orders={len(self.orders)}"
        )
        return self

    def _get_json(self, path: str):
        resp = self.session.get(f"{self.base}{path}", timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        # Spring-style pages wrap the list in "content"
        if isinstance(data, dict):
            data = data.get("content", data.get("data", []))
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise ValueError(f"Unexpected payload shape from {path}: {type(data).__name__}")
        return data

    def _load_remote(self):
        products = [parse_product(p) for p in self._get_json("/products")]
        orders = [parse_order(o) for o in self._get_json("/orders")]
        self.products, self.orders = products, orders

    def _load_mock(self):
        with open(self.mock_data_path, encoding="utf-8") as f:
            data = json.load(f)
        self.products = [parse_product(p) for p in data.get("products", [])]
        self.orders = [parse_order(o) for o in data.get("orders", [])]
