# shawarma_shop/templating.py
from datetime import date

from fastapi.templating import Jinja2Templates

from .catalog import CATEGORIES, format_price
from .config import CONFIG
from .i18n import category_label, product_name
from .paths import TEMPLATES_DIR

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _price(value):
    return format_price(value, CONFIG.currency_symbol)


templates.env.filters["price"] = _price
templates.env.globals.update(
    categories=CATEGORIES,
    category_label=category_label,
    product_name=product_name,
    year=lambda: date.today().year,
)
