# shawarma_shop/store.py
"""Document store for products and orders, with a realtime product feed.

Every subscriber receives the *full* catalog snapshot (newest first) once
when it subscribes and again after each successful product write.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .errors import StoreError
from .models import Order, Product

log = logging.getLogger("shop.store")

Snapshot = List[Dict[str, Any]]
OnChange = Callable[[Snapshot], None]


class Subscription:
    """Handle returned by ``ProductFeed.subscribe``; ``stop()`` is idempotent."""

    def __init__(self, feed: "ProductFeed", on_change: OnChange):
        self._feed = feed
        self.on_change = on_change
        self.active = True

    def stop(self) -> None:
        if not self.active:
            return
        self.active = False
        self._feed._remove(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.stop()


class ProductFeed:
    def __init__(self, load_snapshot: Callable[[], Snapshot]):
        self._load = load_snapshot
        self._subs: List[Subscription] = []
        self._lock = threading.Lock()
        # one load+deliver at a time, so no subscriber sees an older
        # snapshot after a newer one; reentrant for callbacks that write
        self._delivery = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._subs)

    def subscribe(self, on_change: OnChange) -> Subscription:
        sub = Subscription(self, on_change)
        with self._delivery:
            with self._lock:
                self._subs.append(sub)
            log.debug("feed: subscribed (%d active)", len(self))
            # initial load
            self._deliver(sub, self._load())
        return sub

    def _remove(self, sub: Subscription) -> None:
        with self._lock:
            if sub in self._subs:
                self._subs.remove(sub)
        log.debug("feed: unsubscribed (%d active)", len(self))

    def publish(self) -> None:
        with self._delivery:
            with self._lock:
                subs = list(self._subs)
            if not subs:
                return
            snapshot = self._load()
            for sub in subs:
                self._deliver(sub, snapshot)

    def _deliver(self, sub: Subscription, snapshot: Snapshot) -> None:
        if not sub.active:
            return
        try:
            # each subscriber gets its own list
            sub.on_change(list(snapshot))
        except Exception:
            # a broken subscriber must not break the write that triggered it
            log.exception("feed: subscriber callback failed")


class DocumentStore:
    def __init__(self, engine):
        self.engine = engine
        self.products = ProductFeed(self._product_snapshot)

    # ---- reads ----
    def list_products(self) -> List[Product]:
        with Session(self.engine, expire_on_commit=False) as session:
            return list(session.exec(
                select(Product).order_by(Product.created_at.desc(), Product.id.desc())
            ).all())

    def _product_snapshot(self) -> Snapshot:
        return [p.to_doc() for p in self.list_products()]

    def get_product(self, product_id: Any) -> Optional[Product]:
        try:
            pid = int(str(product_id).strip())
        except (TypeError, ValueError):
            return None
        with Session(self.engine, expire_on_commit=False) as session:
            return session.get(Product, pid)

    def list_orders(self) -> List[Order]:
        with Session(self.engine, expire_on_commit=False) as session:
            return list(session.exec(select(Order).order_by(Order.id.desc())).all())

    # ---- realtime ----
    def subscribe_products(self, on_change: OnChange) -> Subscription:
        return self.products.subscribe(on_change)

    # ---- writes ----
    def _add(self, row):
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                session.add(row)
                session.commit()
                session.refresh(row)
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError: integer out of range for the driver
            log.error("store: write of %s failed: %s", type(row).__name__, e)
            raise StoreError(str(e)) from e
        return row

    def add_product(self, fields: Dict[str, Any]) -> Product:
        product = self._add(Product(**fields))
        log.info("store: product #%s created (%s / %s)", product.id, product.name_en, product.name_ar)
        self.products.publish()
        return product

    def add_order(self, fields: Dict[str, Any]) -> Order:
        order = self._add(Order(**fields))
        log.info("store: order #%s created for product %s (qty %s)", order.id, order.product_id, order.qty)
        return order


DEMO_PRODUCTS = [
    {"name_en": "Chicken Shawarma", "name_ar": "شاورما دجاج", "price": 12.5, "category": "shawarma"},
    {"name_en": "Beef Shawarma", "name_ar": "شاورما لحم", "price": 15.0, "category": "shawarma"},
    {"name_en": "Classic Burger", "name_ar": "برغر كلاسيك", "price": 18.0, "category": "burger"},
    {"name_en": "French Fries", "name_ar": "بطاطس مقلية", "price": 7.0, "category": "fries"},
    {"name_en": "Cola", "name_ar": "كولا", "price": 3.5, "category": "drinks"},
]


def seed_if_empty(store: DocumentStore) -> int:
    """Minimal seed: only when the catalog is empty. Returns rows added."""
    if store.list_products():
        return 0
    for fields in DEMO_PRODUCTS:
        store.add_product(dict(fields, image_url=""))
    log.info("store: seeded %d demo products", len(DEMO_PRODUCTS))
    return len(DEMO_PRODUCTS)
