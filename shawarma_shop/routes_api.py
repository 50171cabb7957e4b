# shawarma_shop/routes_api.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .deps import StoreDep, BlobsDep
from .errors import FormError, StoreError
from .forms import OrderInput
from .storefront import StorefrontView

router = APIRouter(prefix="/api", tags=["api"])


class OrderRequest(BaseModel):
    productId: Optional[int] = None
    qty: Any = None
    customer_name: Any = None
    phone: Any = None
    note: Any = None


@router.get("/products")
def api_products(store: StoreDep, blobs: BlobsDep, q: str = "", category: str = "all"):
    with StorefrontView(store, blobs, search_term=q, category_filter=category) as view:
        rows = view.filtered
    return JSONResponse(rows, headers={"Cache-Control": "no-store, max-age=0"})


@router.post("/orders", status_code=201)
def api_create_order(body: OrderRequest, store: StoreDep, blobs: BlobsDep):
    try:
        data = OrderInput.from_form(body.qty, body.customer_name, body.phone, body.note)
    except FormError as e:
        raise HTTPException(status_code=422, detail={"errors": e.errors})

    view = StorefrontView(store, blobs)
    if body.productId is not None:
        view.open_order(body.productId)
    try:
        order = view.submit_order(data)
    except StoreError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return JSONResponse(order.to_doc(), status_code=201)
