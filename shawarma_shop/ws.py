# shawarma_shop/ws.py
import asyncio
import logging
from typing import Dict
from fastapi import WebSocket
from starlette.concurrency import run_in_threadpool

from .store import DocumentStore, Subscription

log = logging.getLogger("shop.ws")


class ConnectionManager:
    """Open WebSockets, each with its own product subscription."""

    def __init__(self) -> None:
        self.active_connections: Dict[WebSocket, Subscription] = {}

    async def connect(self, websocket: WebSocket, store: DocumentStore):
        await websocket.accept()
        loop = asyncio.get_running_loop()

        def push(rows):
            # feed callbacks may fire from a worker thread
            payload = {"type": "products", "products": rows}
            asyncio.run_coroutine_threadsafe(self._send(websocket, payload), loop)

        # the first snapshot is a blocking query
        self.active_connections[websocket] = await run_in_threadpool(store.subscribe_products, push)
        log.info("ws: client connected (%d open)", len(self.active_connections))

    def disconnect(self, websocket: WebSocket):
        sub = self.active_connections.pop(websocket, None)
        if sub is not None:
            sub.stop()
            log.info("ws: client gone (%d open)", len(self.active_connections))

    async def _send(self, websocket: WebSocket, payload: dict):
        """Send one snapshot; a dead socket drops its subscription."""
        try:
            await websocket.send_json(payload)
        except Exception as e:
            log.debug("ws: send failed, dropping client: %r", e)
            self.disconnect(websocket)


manager = ConnectionManager()
