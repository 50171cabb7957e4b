# shawarma_shop/config.py
from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .paths import UPLOADS_DIR

CONFIG_FILE = Path(__file__).resolve().parent / "config.json"

log = logging.getLogger("shop.config")

@dataclass
class StoreConfig:
    db_url: str = "sqlite:///shop.db"
    seed_demo: bool = True

@dataclass
class UploadConfig:
    directory: str = str(UPLOADS_DIR)
    base_url: str = "/uploads"
    max_bytes: int = 5 * 1024 * 1024  # 5 MiB

@dataclass
class AppConfig:
    title: str = "Shawarma Resto"
    default_language: str = "ar"
    currency_symbol: str = "﷼"
    log_level: str = "INFO"
    store: StoreConfig = field(default_factory=StoreConfig)
    uploads: UploadConfig = field(default_factory=UploadConfig)

def _merge(dst: dict, src: dict) -> dict:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            dst[k] = _merge(dst[k], v)
        else:
            dst[k] = v
    return dst

def _defaults() -> dict:
    return {
        "title": "Shawarma Resto",
        "default_language": "ar",
        "currency_symbol": "﷼",
        "log_level": "INFO",
        "store": {
            "db_url": "sqlite:///shop.db",
            "seed_demo": True,
        },
        "uploads": {
            "directory": str(UPLOADS_DIR),
            "base_url": "/uploads",
            "max_bytes": 5 * 1024 * 1024,
        },
    }

def load_config(path: Path = CONFIG_FILE, environ: dict | None = None) -> AppConfig:
    env = os.environ if environ is None else environ
    data = _defaults()
    if path.exists():
        try:
            file_data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(file_data, dict):
                raise ValueError("top level must be an object")
            for section in ("store", "uploads"):
                if section in file_data and not isinstance(file_data[section], dict):
                    raise ValueError(f"\"{section}\" must be an object")
            data = _merge(data, file_data)
        except (OSError, ValueError) as e:
            # malformed file: keep the defaults
            log.warning("Ignoring config file %s: %s", path, e)

    # environment wins over the file
    if env.get("SHOP_DB_URL"):
        data["store"]["db_url"] = env["SHOP_DB_URL"]
    if env.get("SHOP_UPLOADS_DIR"):
        data["uploads"]["directory"] = env["SHOP_UPLOADS_DIR"]
    if env.get("SHOP_LOG_LEVEL"):
        data["log_level"] = env["SHOP_LOG_LEVEL"]

    s = data["store"]
    u = data["uploads"]
    lang = str(data.get("default_language", "ar"))
    return AppConfig(
        title=str(data.get("title", "Shawarma Resto")),
        default_language=lang if lang in ("ar", "en") else "ar",
        currency_symbol=str(data.get("currency_symbol", "﷼")),
        log_level=str(data.get("log_level", "INFO")).upper(),
        store=StoreConfig(
            db_url=str(s.get("db_url", "sqlite:///shop.db")),
            seed_demo=bool(s.get("seed_demo", True)),
        ),
        uploads=UploadConfig(
            directory=str(u.get("directory", str(UPLOADS_DIR))),
            base_url=str(u.get("base_url", "/uploads")).rstrip("/"),
            max_bytes=int(u.get("max_bytes", 5 * 1024 * 1024)),
        ),
    )

# singleton loaded at import
CONFIG = load_config()
