# shawarma_shop/errors.py
from __future__ import annotations

from typing import Dict


class ShopError(Exception):
    """Base class for failures shown to the customer/admin as a message."""

    # key into i18n.STRINGS
    message_key = "errGeneric"
    status_code = 500


class FormError(ShopError):
    message_key = "errForm"
    status_code = 400

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{k}: {v}" for k, v in self.errors.items()))


class UploadError(ShopError):
    message_key = "errUpload"
    status_code = 502

    def __init__(self, detail: str, message_key: str | None = None, status_code: int | None = None):
        super().__init__(detail)
        if message_key:
            self.message_key = message_key
        if status_code:
            self.status_code = status_code


class StoreError(ShopError):
    message_key = "errStore"
    status_code = 502
