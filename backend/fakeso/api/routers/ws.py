# fakeso/api/routers/ws.py
import json
import logging

from fastapi import APIRouter, WebSocket
from starlette.websockets import WebSocketDisconnect

from fakeso.core.pubsub import Channel

logger = logging.getLogger("uvicorn.error")

def build_router(channel: Channel) -> APIRouter:
    """Build the router exposing the push channel at /ws."""
    router = APIRouter()

    @router.websocket("/ws")
    async def ws_events(ws: WebSocket):
        """
        WebSocket endpoint for push notifications.

        Message flow:
        1. Client connects; the server registers it with the channel
        2. Server sends {"event": "connected", "data": {}} once registered
        3. Server pushes {"event": "...", "data": {...}} frames as events happen
        4. Anything the client sends is ignored
        5. Client is removed from the channel when the connection closes
        """
        await ws.accept()
        try:
            await channel.connect(ws)
            await ws.send_text(json.dumps({"event": "connected", "data": {}}))
            logger.info("[ws] connected (%d clients)", channel.client_count)
            while True:
                await ws.receive_text()
        except WebSocketDisconnect:
            logger.info("[ws] disconnected")
        finally:
            channel.disconnect(ws)

    return router
