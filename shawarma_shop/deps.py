# shawarma_shop/deps.py
from typing import Annotated

from fastapi import Depends

from .blobs import BlobStore
from .config import CONFIG
from .db import engine
from .store import DocumentStore

# process-wide clients, created once at import
store = DocumentStore(engine)
blobs = BlobStore(CONFIG.uploads.directory, CONFIG.uploads.base_url, CONFIG.uploads.max_bytes)


def get_store() -> DocumentStore:
    return store


def get_blobs() -> BlobStore:
    return blobs


# Typed dependencies (tests swap them through app.dependency_overrides)
StoreDep = Annotated[DocumentStore, Depends(get_store)]
BlobsDep = Annotated[BlobStore, Depends(get_blobs)]
