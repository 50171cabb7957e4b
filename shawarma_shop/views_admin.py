# shawarma_shop/views_admin.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request, Form, UploadFile, File
from fastapi.responses import RedirectResponse

from .deps import StoreDep, BlobsDep
from .errors import ShopError
from .forms import ProductInput
from .storefront import ImageUpload
from .views_storefront import make_view, render_page

log = logging.getLogger("shop.admin")

router = APIRouter()

# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

def _read_image(image_file: UploadFile | None) -> ImageUpload | None:
    """None when the file input was left empty."""
    if not image_file or not image_file.filename:
        return None
    data = image_file.file.read()
    if not data:
        return None
    return ImageUpload(filename=image_file.filename, data=data, content_type=image_file.content_type)

@router.post("/admin/products")
def admin_product_add(
    request: Request,
    store: StoreDep,
    blobs: BlobsDep,
    name_en: str = Form(""),
    name_ar: str = Form(""),
    price: str = Form(""),
    category: str = Form(""),
    image: Optional[UploadFile] = File(None),
    lang: Optional[str] = Form(None),
    q: str = Form(""),
    filter_category: str = Form("all"),
    admin: str = Form("1"),
):
    with make_view(store, blobs, lang, q, filter_category, admin) as view:
        try:
            data = ProductInput.from_form(name_en, name_ar, price, category)
            product = view.create_product(data, _read_image(image))
        except ShopError as e:
            log.warning("product rejected: %s", e)
            return render_page(
                request, view,
                status_code=e.status_code,
                error=e,
                form={"name_en": name_en, "name_ar": name_ar, "price": price, "category": category},
                form_name="product",
            )
        log.info("admin: added product #%s", product.id)
        return RedirectResponse(url=view.url(added=1), status_code=303)
