# shawarma_shop/models.py
from __future__ import annotations

from typing import Any, Dict, Optional
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Product(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name_en: str
    name_ar: str
    price: float = 0.0
    category: str = Field(index=True)  # shawarma | burger | fries | drinks | seafood
    image_url: str = ""                # "" when no image was uploaded
    created_at: datetime = Field(default_factory=_now, nullable=False, index=True)

    def to_doc(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name_en": self.name_en,
            "name_ar": self.name_ar,
            "price": self.price,
            "category": self.category,
            "imageUrl": self.image_url,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class Order(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    # no FK: the product may disappear, the snapshot below stays
    product_id: Optional[int] = Field(default=None, index=True)
    product_name_en: Optional[str] = None
    product_name_ar: Optional[str] = None
    price: Optional[float] = None
    qty: int = 1
    customer_name: str
    phone: str
    note: str = ""
    status: str = "new"
    created_at: datetime = Field(default_factory=_now, nullable=False)

    def to_doc(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "productId": self.product_id,
            "product_name_en": self.product_name_en,
            "product_name_ar": self.product_name_ar,
            "price": self.price,
            "qty": self.qty,
            "customer_name": self.customer_name,
            "phone": self.phone,
            "note": self.note,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
