# shawarma_shop/views_storefront.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from .config import CONFIG
from .deps import StoreDep, BlobsDep
from .errors import ShopError, FormError
from .forms import OrderInput
from .storefront import StorefrontView
from .templating import templates

log = logging.getLogger("shop.views")

router = APIRouter()

# ---------------------------------------------------------------------------
# helpers shared with the admin views
# ---------------------------------------------------------------------------

def _truthy(v: Any) -> bool:
    return str(v or "").strip().lower() in ("1", "true", "on", "yes")

def make_view(store, blobs, lang: Optional[str], q: str, category: str, admin: Any) -> StorefrontView:
    return StorefrontView(
        store,
        blobs,
        language=lang or CONFIG.default_language,
        search_term=q,
        category_filter=category,
        admin_mode=_truthy(admin),
    )

def render_page(
    request: Request,
    view: StorefrontView,
    *,
    template: str = "index.html",
    status_code: int = 200,
    flash: Optional[str] = None,
    error: Optional[ShopError] = None,
    form: Optional[Dict[str, Any]] = None,
    form_name: Optional[str] = None,
):
    field_errors = error.errors if isinstance(error, FormError) else {}
    return templates.TemplateResponse(
        request,
        template,
        {
            "view": view,
            "t": view.strings,
            "lang": view.language,
            "filtered": view.filtered,
            "flash": flash,
            "error_key": error.message_key if error else None,
            "field_errors": field_errors,
            "form": form or {},
            "form_name": form_name,
            "shop_title": CONFIG.title,
        },
        status_code=status_code,
    )

# ---------------------------------------------------------------------------
# pages
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
def storefront_page(
    request: Request,
    store: StoreDep,
    blobs: BlobsDep,
    lang: Optional[str] = None,
    q: str = "",
    category: str = "all",
    admin: str = "",
    order: Optional[str] = None,
    added: int = 0,
    ordered: int = 0,
):
    flash = "added" if added else ("successOrder" if ordered else None)
    with make_view(store, blobs, lang, q, category, admin) as view:
        if order:
            view.open_order(order)
        return render_page(request, view, flash=flash)

@router.get("/menu/fragment", response_class=HTMLResponse)
def menu_fragment(
    request: Request,
    store: StoreDep,
    blobs: BlobsDep,
    lang: Optional[str] = None,
    q: str = "",
    category: str = "all",
    admin: str = "",
):
    """Menu grid only: re-fetched by the page on every realtime push."""
    with make_view(store, blobs, lang, q, category, admin) as view:
        return render_page(request, view, template="_menu.html")

# ---------------------------------------------------------------------------
# order
# ---------------------------------------------------------------------------

@router.post("/orders")
def submit_order(
    request: Request,
    store: StoreDep,
    blobs: BlobsDep,
    product_id: str = Form(""),
    qty: str = Form(""),
    name: str = Form(""),
    phone: str = Form(""),
    note: str = Form(""),
    lang: Optional[str] = Form(None),
    q: str = Form(""),
    category: str = Form("all"),
    admin: str = Form(""),
):
    with make_view(store, blobs, lang, q, category, admin) as view:
        view.open_order(product_id)
        try:
            view.submit_order(OrderInput.from_form(qty, name, phone, note))
        except ShopError as e:
            log.warning("order rejected: %s", e)
            return render_page(
                request, view,
                status_code=e.status_code,
                error=e,
                form={"qty": qty, "name": name, "phone": phone, "note": note},
                form_name="order",
            )
        return RedirectResponse(url=view.url(ordered=1), status_code=303)
