# shawarma_shop/forms.py
"""Typed form inputs, validated before anything is written."""
from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .catalog import CATEGORY_KEYS
from .errors import FormError


def _required(v: Any) -> str:
    s = (str(v) if v is not None else "").strip()
    if not s:
        raise ValueError("errRequired")
    return s


MAX_QTY = 1000


def parse_qty(raw: Any) -> int:
    """Missing, non-numeric, zero or negative quantities become 1."""
    if raw is None:
        return 1
    try:
        n = float(str(raw).strip())
    except ValueError:
        return 1
    if not math.isfinite(n) or n < 1:
        return 1
    return int(n)


def _errors_from(exc: ValidationError) -> dict[str, str]:
    out: dict[str, str] = {}
    for e in exc.errors():
        field = str(e["loc"][0]) if e.get("loc") else "form"
        ctx_err = (e.get("ctx") or {}).get("error")
        key = str(ctx_err) if ctx_err else "errRequired"
        out.setdefault(field, key)
    return out


class ProductInput(BaseModel):
    name_en: str
    name_ar: str
    price: float
    category: str

    @field_validator("name_en", "name_ar", mode="before")
    @classmethod
    def _names(cls, v):
        return _required(v)

    @field_validator("price", mode="before")
    @classmethod
    def _price(cls, v):
        try:
            n = float(str(v).strip().replace(",", "."))
        except (TypeError, ValueError):
            raise ValueError("errPrice")
        if not math.isfinite(n) or n < 0:
            raise ValueError("errPrice")
        return n

    @field_validator("category", mode="before")
    @classmethod
    def _category(cls, v):
        s = (str(v) if v is not None else "").strip().lower()
        if s not in CATEGORY_KEYS:
            raise ValueError("errCategory")
        return s

    @classmethod
    def from_form(cls, name_en: Any, name_ar: Any, price: Any, category: Any) -> "ProductInput":
        try:
            return cls(name_en=name_en, name_ar=name_ar, price=price, category=category)
        except ValidationError as exc:
            raise FormError(_errors_from(exc)) from exc


class OrderInput(BaseModel):
    qty: int = 1
    customer_name: str
    phone: str
    note: str = ""

    @field_validator("qty", mode="before")
    @classmethod
    def _qty(cls, v):
        n = parse_qty(v)
        if n > MAX_QTY:
            raise ValueError("errQty")
        return n

    @field_validator("customer_name", "phone", mode="before")
    @classmethod
    def _req(cls, v):
        return _required(v)

    @field_validator("note", mode="before")
    @classmethod
    def _note(cls, v):
        return (str(v) if v is not None else "").strip()

    @classmethod
    def from_form(cls, qty: Any, name: Any, phone: Any, note: Optional[Any] = None) -> "OrderInput":
        try:
            return cls(qty=qty, customer_name=name, phone=phone, note=note)
        except ValidationError as exc:
            raise FormError(_errors_from(exc)) from exc
