# shawarma_shop/storefront.py
"""The storefront view: UI state, the derived menu, and the two submit flows.

One view lives as long as the page it renders. ``mount()`` subscribes to
the product feed, ``unmount()`` releases the subscription (exactly once).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from .blobs import BlobStore
from .catalog import ALL, filter_products, normalize_category_filter
from .forms import OrderInput, ProductInput
from .i18n import STRINGS, direction, normalize_language
from .models import Order, Product
from .store import DocumentStore, Subscription

log = logging.getLogger("shop.storefront")


@dataclass
class ImageUpload:
    filename: str
    data: bytes
    content_type: Optional[str] = None


class StorefrontView:
    def __init__(
        self,
        store: DocumentStore,
        blobs: BlobStore,
        language: str = "ar",
        search_term: str = "",
        category_filter: str = ALL,
        admin_mode: bool = False,
    ):
        self.store = store
        self.blobs = blobs
        self.language = normalize_language(language)
        self.search_term = search_term or ""
        self.category_filter = normalize_category_filter(category_filter)
        self.admin_mode = bool(admin_mode)
        self.products: List[Dict[str, Any]] = []
        self.order_modal_open = False
        self.active_product: Optional[Dict[str, Any]] = None
        self._subscription: Optional[Subscription] = None

    # ---- lifecycle ----
    def mount(self) -> "StorefrontView":
        if self._subscription is None:
            self._subscription = self.store.subscribe_products(self._on_products)
        return self

    def unmount(self) -> None:
        sub, self._subscription = self._subscription, None
        if sub is not None:
            sub.stop()

    @property
    def mounted(self) -> bool:
        return self._subscription is not None

    def __enter__(self):
        return self.mount()

    def __exit__(self, *exc):
        self.unmount()

    def _on_products(self, rows: List[Dict[str, Any]]) -> None:
        self.products = rows

    # ---- derived ----
    @property
    def filtered(self) -> List[Dict[str, Any]]:
        return filter_products(self.products, self.search_term, self.category_filter)

    @property
    def strings(self) -> Dict[str, str]:
        return STRINGS[self.language]

    @property
    def is_rtl(self) -> bool:
        return self.language == "ar"

    @property
    def dir(self) -> str:
        return direction(self.language)

    # ---- state changes ----
    def set_language(self, lang: str) -> None:
        self.language = normalize_language(lang, self.language)

    def set_search(self, term: str) -> None:
        self.search_term = term or ""

    def set_category(self, key: str) -> None:
        self.category_filter = normalize_category_filter(key)

    def set_admin(self, on: bool) -> None:
        self.admin_mode = bool(on)

    def open_order(self, product_id: Any) -> Optional[Dict[str, Any]]:
        """Bind the order modal to a product of the current catalog."""
        pid = str(product_id)
        match = next((p for p in self.products if str(p.get("id")) == pid), None)
        if match is None:
            p = self.store.get_product(product_id)
            match = p.to_doc() if p else None
        self.active_product = match
        self.order_modal_open = True
        return match

    def close_order(self) -> None:
        self.order_modal_open = False
        self.active_product = None

    # ---- writes ----
    def create_product(self, data: ProductInput, image: Optional[ImageUpload] = None) -> Product:
        image_url = ""
        if image is not None and image.data:
            path = self.blobs.object_path(image.filename)
            self.blobs.upload(path, image.data, image.content_type)
            image_url = self.blobs.download_url(path)

        return self.store.add_product({
            "name_en": data.name_en,
            "name_ar": data.name_ar,
            "price": data.price,
            "category": data.category,
            "image_url": image_url,
        })

    def submit_order(self, data: OrderInput) -> Order:
        p = self.active_product
        if p is None:
            log.warning("order submitted without an active product")
        order = self.store.add_order({
            "product_id": p.get("id") if p else None,
            "product_name_en": p.get("name_en") if p else None,
            "product_name_ar": p.get("name_ar") if p else None,
            "price": p.get("price") if p else None,
            "qty": data.qty,
            "customer_name": data.customer_name,
            "phone": data.phone,
            "note": data.note,
            "status": "new",
        })
        self.close_order()
        return order

    # ---- urls ----
    def query(self, **changes: Any) -> Dict[str, str]:
        q: Dict[str, Any] = {
            "lang": self.language,
            "q": self.search_term,
            "category": self.category_filter,
            "admin": "1" if self.admin_mode else "",
        }
        q.update(changes)
        return {
            k: str(v) for k, v in q.items()
            if v not in (None, "") and not (k == "category" and v == ALL)
        }

    def url(self, path: str = "/", **changes: Any) -> str:
        qs = urlencode(self.query(**changes))
        return f"{path}?{qs}" if qs else path
