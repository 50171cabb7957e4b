import logging
from pathlib import Path

from fastapi import FastAPI, WebSocket
from fastapi.responses import PlainTextResponse
from fastapi.websockets import WebSocketDisconnect
from starlette.staticfiles import StaticFiles

from . import views_storefront, views_admin, routes_api
from .config import CONFIG
from .db import create_db_and_tables
from .deps import StoreDep, store
from .paths import STATIC_DIR
from .store import seed_if_empty
from .ws import manager

logging.basicConfig(
    level=CONFIG.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("shop")

UPLOADS_DIR = Path(CONFIG.uploads.directory)
UPLOADS_DIR.mkdir(parents=True, exist_ok=True)

app = FastAPI(title=CONFIG.title)

class CachingStaticFiles(StaticFiles):
    async def get_response(self, path, scope):
        resp = await super().get_response(path, scope)
        if resp.status_code == 200:
            # uploaded names are timestamped, the content never changes
            resp.headers["Cache-Control"] = "public, max-age=31536000, immutable"
        return resp

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.mount(CONFIG.uploads.base_url, CachingStaticFiles(directory=str(UPLOADS_DIR)), name="uploads")


@app.on_event("startup")
def on_startup():
    create_db_and_tables()
    if CONFIG.store.seed_demo:
        seed_if_empty(store)
    log.info("startup: db=%s uploads=%s", CONFIG.store.db_url, UPLOADS_DIR)

@app.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"

@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, store: StoreDep):
    await manager.connect(websocket, store)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket)

app.include_router(views_storefront.router)
app.include_router(views_admin.router)
app.include_router(routes_api.router)
