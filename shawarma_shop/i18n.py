# shawarma_shop/i18n.py
from __future__ import annotations

from typing import Any, Dict

from .catalog import get_category

LANGUAGES = ("ar", "en")

STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Shawarma Resto",
        "subtitle": "Fresh • Fast • Tasty",
        "search": "Search",
        "category": "Category",
        "all": "All",
        "orderNow": "Order Now",
        "added": "Added!",
        "qty": "Qty",
        "name": "Your Name",
        "phone": "Phone",
        "note": "Note (optional)",
        "placeOrder": "Place Order",
        "cancel": "Cancel",
        "admin": "Admin Mode",
        "addProduct": "Add Product",
        "productEn": "Product name (English)",
        "productAr": "اسم المنتج (عربي)",
        "price": "Price (SAR)",
        "image": "Image",
        "create": "Create",
        "menu": "Menu",
        "empty": "No products yet.",
        "successOrder": "Order submitted! We'll contact you soon.",
        "close": "Close",
        "errGeneric": "Something went wrong. Please try again.",
        "errForm": "Please fix the highlighted fields.",
        "errUpload": "The image could not be uploaded.",
        "errStore": "Could not save. Please try again.",
        "errRequired": "This field is required.",
        "errPrice": "Enter a valid price (0 or more).",
        "errCategory": "Choose a category.",
        "errImage": "The file is not a valid image.",
        "errImageSize": "The image is too large.",
        "errQty": "Quantity must be between 1 and 1000.",
    },
    "ar": {
        "title": "مطعم شاورما",
        "subtitle": "طازج • سريع • لذيذ",
        "search": "ابحث",
        "category": "القسم",
        "all": "الكل",
        "orderNow": "اطلب الآن",
        "added": "تم الإضافة!",
        "qty": "الكمية",
        "name": "اسمك",
        "phone": "رقم الهاتف",
        "note": "ملاحظة (اختياري)",
        "placeOrder": "إرسال الطلب",
        "cancel": "إلغاء",
        "admin": "وضع الإدارة",
        "addProduct": "إضافة منتج",
        "productEn": "اسم المنتج (إنجليزي)",
        "productAr": "اسم المنتج (عربي)",
        "price": "السعر (ريال)",
        "image": "صورة",
        "create": "إنشاء",
        "menu": "القائمة",
        "empty": "لا توجد منتجات.",
        "successOrder": "تم إرسال الطلب! سنتواصل معك قريبًا.",
        "close": "إغلاق",
        "errGeneric": "حدث خطأ. حاول مرة أخرى.",
        "errForm": "يرجى تصحيح الحقول المحددة.",
        "errUpload": "تعذر رفع الصورة.",
        "errStore": "تعذر الحفظ. حاول مرة أخرى.",
        "errRequired": "هذا الحقل مطلوب.",
        "errPrice": "أدخل سعرًا صحيحًا (0 أو أكثر).",
        "errCategory": "اختر قسمًا.",
        "errImage": "الملف ليس صورة صالحة.",
        "errImageSize": "حجم الصورة كبير جدًا.",
        "errQty": "يجب أن تكون الكمية بين 1 و 1000.",
    },
}


def normalize_language(value: str | None, default: str = "ar") -> str:
    v = (value or "").strip().lower()
    return v if v in LANGUAGES else default


def direction(lang: str) -> str:
    return "rtl" if lang == "ar" else "ltr"


def product_name(p: Any, lang: str) -> str:
    if p is None:
        return ""
    field = "name_ar" if lang == "ar" else "name_en"
    if isinstance(p, dict):
        return p.get(field) or ""
    return getattr(p, field, "") or ""


def category_label(key: str | None, lang: str) -> str:
    c = get_category(key)
    if not c:
        return ""
    return c.ar if lang == "ar" else c.en
