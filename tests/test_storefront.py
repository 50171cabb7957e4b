import pytest

from shawarma_shop.errors import UploadError
from shawarma_shop.forms import OrderInput, ProductInput
from shawarma_shop.storefront import ImageUpload, StorefrontView


def test_defaults(store, blobs):
    view = StorefrontView(store, blobs)
    assert view.language == "ar"
    assert view.is_rtl and view.dir == "rtl"
    assert view.category_filter == "all"
    assert view.search_term == ""
    assert view.admin_mode is False
    assert view.order_modal_open is False
    assert view.active_product is None


def test_mount_loads_catalog_and_unmount_releases(store, blobs, shawarma):
    view = StorefrontView(store, blobs)
    view.mount()
    assert [p["id"] for p in view.products] == [shawarma.id]
    assert len(store.products) == 1
    view.unmount()
    view.unmount()
    assert len(store.products) == 0
    assert not view.mounted


def test_live_updates_replace_products(store, blobs, shawarma):
    with StorefrontView(store, blobs) as view:
        first = view.products
        store.add_product({"name_en": "Fries", "name_ar": "بطاطس", "price": 7, "category": "fries", "image_url": ""})
        assert view.products is not first
        assert [p["name_en"] for p in view.products] == ["Fries", "Chicken Shawarma"]


def test_empty_snapshot_empties_the_menu(store, blobs):
    with StorefrontView(store, blobs, search_term="x", category_filter="burger") as view:
        view._on_products([])
        assert view.products == []
        assert view.filtered == []


def test_category_with_no_products_shows_nothing(store, blobs, shawarma):
    with StorefrontView(store, blobs) as view:
        view.set_category("burger")
        assert view.filtered == []
        view.set_category("shawarma")
        assert len(view.filtered) == 1


def test_language_toggle_touches_only_presentation(store, blobs, shawarma):
    with StorefrontView(store, blobs, search_term="chick", category_filter="shawarma") as view:
        before = (list(view.products), view.search_term, view.category_filter, view.filtered)
        view.set_language("en")
        assert view.dir == "ltr"
        assert view.strings["orderNow"] == "Order Now"
        assert (view.products, view.search_term, view.category_filter, view.filtered) == before
        view.set_language("ar")
        assert view.dir == "rtl"
        assert view.strings["orderNow"] == "اطلب الآن"


def test_create_product_without_image(store, blobs):
    view = StorefrontView(store, blobs, admin_mode=True)
    p = view.create_product(ProductInput.from_form("Cola", "كولا", "3.5", "drinks"))
    assert p.image_url == ""
    assert p.price == 3.5
    assert p.category == "drinks"
    assert p.created_at is not None


def test_create_product_with_image(store, blobs, png_bytes):
    view = StorefrontView(store, blobs, admin_mode=True)
    p = view.create_product(
        ProductInput.from_form("Wrap", "راب", "9", "shawarma"),
        ImageUpload("wrap.png", png_bytes, "image/png"),
    )
    assert p.image_url.startswith("/uploads/products/")
    assert p.image_url.endswith("_wrap.png")
    stored = p.image_url[len("/uploads/"):]
    assert (blobs.root / stored).read_bytes() == png_bytes


def test_empty_image_is_ignored(store, blobs):
    view = StorefrontView(store, blobs, admin_mode=True)
    p = view.create_product(ProductInput.from_form("Wrap", "راب", "9", "shawarma"), ImageUpload("x.png", b""))
    assert p.image_url == ""


def test_failed_upload_writes_nothing(store, blobs):
    view = StorefrontView(store, blobs, admin_mode=True)
    with pytest.raises(UploadError):
        view.create_product(
            ProductInput.from_form("Wrap", "راب", "9", "shawarma"),
            ImageUpload("wrap.png", b"not an image", "image/png"),
        )
    assert store.list_products() == []


def test_order_snapshots_active_product(store, blobs, shawarma):
    with StorefrontView(store, blobs) as view:
        view.open_order(shawarma.id)
        assert view.order_modal_open
        assert view.active_product["id"] == shawarma.id

        order = view.submit_order(OrderInput.from_form(None, "Ali", "0500000000"))

        assert order.qty == 1
        assert order.price == 12.50
        assert order.status == "new"
        assert order.product_id == shawarma.id
        assert order.product_name_en == "Chicken Shawarma"
        assert order.product_name_ar == "شاورما دجاج"
        assert order.customer_name == "Ali"
        assert not view.order_modal_open
        assert view.active_product is None


@pytest.mark.parametrize("qty, expected", [("", 1), ("0", 1), ("5", 5)])
def test_order_quantity(store, blobs, shawarma, qty, expected):
    view = StorefrontView(store, blobs)
    view.open_order(shawarma.id)
    order = view.submit_order(OrderInput.from_form(qty, "Ali", "0500000000"))
    assert order.qty == expected


def test_order_snapshot_survives_later_catalog_changes(store, blobs, shawarma):
    view = StorefrontView(store, blobs)
    view.open_order(shawarma.id)
    order = view.submit_order(OrderInput.from_form("2", "Ali", "1"))
    store.add_product({"name_en": "Other", "name_ar": "آخر", "price": 1, "category": "fries", "image_url": ""})
    saved = store.list_orders()[0]
    assert saved.id == order.id
    assert saved.product_name_en == "Chicken Shawarma"
    assert saved.price == 12.5


def test_order_without_active_product_still_written(store, blobs):
    view = StorefrontView(store, blobs)
    view.open_order("missing")
    assert view.order_modal_open and view.active_product is None
    order = view.submit_order(OrderInput.from_form("1", "Ali", "1"))
    assert order.product_id is None
    assert order.product_name_en is None
    assert order.price is None
    assert order.status == "new"


def test_url_keeps_state(store, blobs):
    view = StorefrontView(store, blobs, language="en", search_term="cola", category_filter="drinks", admin_mode=True)
    assert view.url() == "/?lang=en&q=cola&category=drinks&admin=1"
    assert view.url(category="all", admin="") == "/?lang=en&q=cola"
    assert view.url("/menu/fragment", q="") == "/menu/fragment?lang=en&category=drinks&admin=1"


def test_url_keeps_search_term_all(store, blobs):
    view = StorefrontView(store, blobs, language="en", search_term="all")
    assert view.url() == "/?lang=en&q=all"
    assert view.url(category="all") == "/?lang=en&q=all"
