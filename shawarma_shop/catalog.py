# shawarma_shop/catalog.py
from __future__ import annotations

import math
from typing import Any, Iterable, List, NamedTuple, Optional


class Category(NamedTuple):
    key: str
    en: str
    ar: str


CATEGORIES: List[Category] = [
    Category("shawarma", "Shawarma", "شاورما"),
    Category("burger", "Burger", "برغر"),
    Category("fries", "Fries", "بطاطس"),
    Category("drinks", "Drinks", "مشروبات"),
    Category("seafood", "Seafood", "سمك"),
]

CATEGORY_KEYS = tuple(c.key for c in CATEGORIES)
ALL = "all"


def get_category(key: str | None) -> Optional[Category]:
    for c in CATEGORIES:
        if c.key == key:
            return c
    return None


def normalize_category_filter(value: str | None) -> str:
    """Unknown or empty filter values fall back to "all"."""
    v = (value or "").strip().lower()
    return v if v in CATEGORY_KEYS else ALL


def _field(p: Any, name: str) -> Any:
    if isinstance(p, dict):
        return p.get(name)
    return getattr(p, name, None)


def filter_products(products: Iterable[Any], search_term: str = "", category_filter: str = ALL) -> list:
    """Category + substring filter over both name fields, order preserved.

    Works on Product rows as well as plain dicts shaped like them.
    """
    term = (search_term or "").strip().lower()
    out = []
    for p in products:
        in_cat = category_filter == ALL or _field(p, "category") == category_filter
        haystack = f"{_field(p, 'name_en')} {_field(p, 'name_ar')}".lower()
        if in_cat and term in haystack:
            out.append(p)
    return out


def format_price(value: Any, symbol: str = "﷼") -> str:
    try:
        n = float(value)
    except (TypeError, ValueError):
        return f"{symbol}NaN"
    if not math.isfinite(n):
        return f"{symbol}NaN"
    return f"{symbol}{n:.2f}"
