import pytest

from shawarma_shop.errors import FormError
from shawarma_shop.forms import OrderInput, ProductInput, parse_qty


@pytest.mark.parametrize("raw, expected", [
    (None, 1),
    ("", 1),
    ("abc", 1),
    ("0", 1),
    ("-3", 1),
    ("nan", 1),
    ("5", 5),
    (" 2 ", 2),
    ("2.7", 2),
])
def test_parse_qty(raw, expected):
    assert parse_qty(raw) == expected


def test_order_input_defaults():
    data = OrderInput.from_form("", " Ali ", "0500000000")
    assert data.qty == 1
    assert data.customer_name == "Ali"
    assert data.phone == "0500000000"
    assert data.note == ""


def test_order_input_requires_name_and_phone():
    with pytest.raises(FormError) as exc:
        OrderInput.from_form("1", "  ", "")
    assert exc.value.errors == {"customer_name": "errRequired", "phone": "errRequired"}


def test_product_input_parses_price():
    data = ProductInput.from_form("Cola", "كولا", "3.5", "drinks")
    assert data.price == 3.5
    assert data.category == "drinks"


def test_product_input_keeps_price_as_entered():
    assert ProductInput.from_form("Cola", "كولا", "12.345", "drinks").price == 12.345
    assert ProductInput.from_form("Cola", "كولا", "0.001", "drinks").price == 0.001


@pytest.mark.parametrize("qty", ["1001", "1e20", "99999999999999999999"])
def test_order_input_rejects_huge_quantity(qty):
    with pytest.raises(FormError) as exc:
        OrderInput.from_form(qty, "Ali", "1")
    assert exc.value.errors == {"qty": "errQty"}


def test_order_input_accepts_max_quantity():
    assert OrderInput.from_form("1000", "Ali", "1").qty == 1000


def test_product_input_accepts_comma_decimal_and_zero():
    assert ProductInput.from_form("Water", "ماء", "2,25", "drinks").price == 2.25
    assert ProductInput.from_form("Water", "ماء", "0", "drinks").price == 0


@pytest.mark.parametrize("price", ["", "abc", "nan", "inf", "-1"])
def test_product_input_rejects_bad_price(price):
    with pytest.raises(FormError) as exc:
        ProductInput.from_form("Cola", "كولا", price, "drinks")
    assert exc.value.errors == {"price": "errPrice"}


def test_product_input_rejects_unknown_category_and_blank_names():
    with pytest.raises(FormError) as exc:
        ProductInput.from_form("", "كولا", "3", "pizza")
    assert exc.value.errors == {"name_en": "errRequired", "category": "errCategory"}
