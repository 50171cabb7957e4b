# shawarma_shop/blobs.py
from __future__ import annotations

import io
import logging
import os
import re
import time
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import UploadError

log = logging.getLogger("shop.blobs")

SAFE_RE = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(name: str) -> str:
    """ASCII-safe name; the extension survives a non-ASCII stem."""
    stem, ext = os.path.splitext(os.path.basename(name or ""))
    ext = SAFE_RE.sub("", ext.lower())[:10]
    if ext == ".":
        ext = ""
    stem = SAFE_RE.sub("_", stem).strip("._-")[:120] or "image"
    return stem + ext


class BlobStore:
    """Product images on the local disk, served under ``base_url``."""

    def __init__(self, root: str | Path, base_url: str = "/uploads", max_bytes: int = 5 * 1024 * 1024):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")
        self.max_bytes = max_bytes

    def object_path(self, filename: str, now_ms: int | None = None) -> str:
        """``products/<epoch ms>_<filename>``"""
        ts = int(time.time() * 1000) if now_ms is None else int(now_ms)
        return f"products/{ts}_{safe_filename(filename)}"

    def _resolve(self, path: str) -> Path:
        dest = (self.root / path).resolve()
        if self.root.resolve() not in dest.parents:
            raise UploadError(f"path outside blob root: {path}")
        return dest

    def upload(self, path: str, data: bytes, content_type: str | None = None) -> None:
        if not data:
            raise UploadError("empty upload")
        if len(data) > self.max_bytes:
            raise UploadError(f"upload too large ({len(data)} > {self.max_bytes} bytes)", "errImageSize", 400)
        if content_type and not content_type.startswith("image/"):
            raise UploadError(f"not an image: {content_type}", "errImage", 400)
        try:
            with Image.open(io.BytesIO(data)) as im:
                im.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise UploadError(f"not an image: {e}", "errImage", 400) from e

        dest = self._resolve(path)
        tmp = dest.with_name(dest.name + ".part")
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("wb") as f:
                f.write(data)
            os.replace(tmp, dest)
        except OSError as e:
            log.error("blobs: write of %s failed: %s", path, e)
            tmp.unlink(missing_ok=True)
            raise UploadError(str(e)) from e
        log.info("blobs: stored %s (%d bytes)", path, len(data))

    def download_url(self, path: str) -> str:
        if not self._resolve(path).exists():
            raise UploadError(f"no such object: {path}")
        return f"{self.base_url}/{path}"
