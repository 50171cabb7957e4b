from __future__ import annotations

import io
import os
import tempfile

# keep imports of the app away from the real DB and upload dir
os.environ.setdefault("SHOP_DB_URL", "sqlite://")
os.environ.setdefault("SHOP_UPLOADS_DIR", tempfile.mkdtemp(prefix="shop-uploads-"))

import pytest
from PIL import Image

from shawarma_shop.blobs import BlobStore
from shawarma_shop.db import create_db_and_tables, make_engine
from shawarma_shop.store import DocumentStore


@pytest.fixture
def store():
    engine = make_engine("sqlite://")
    create_db_and_tables(engine)
    return DocumentStore(engine)


@pytest.fixture
def blobs(tmp_path):
    return BlobStore(tmp_path / "uploads", "/uploads", max_bytes=64 * 1024)


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), (200, 120, 40)).save(buf, "PNG")
    return buf.getvalue()


@pytest.fixture
def shawarma(store):
    return store.add_product({
        "name_en": "Chicken Shawarma",
        "name_ar": "شاورما دجاج",
        "price": 12.5,
        "category": "shawarma",
        "image_url": "",
    })


@pytest.fixture
def client(store, blobs):
    from fastapi.testclient import TestClient

    from shawarma_shop.deps import get_blobs, get_store
    from shawarma_shop.main import app

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_blobs] = lambda: blobs
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
