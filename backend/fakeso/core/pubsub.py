# fakeso/core/pubsub.py
"""
Push notification channel.

Keeps the set of connected WebSocket clients and broadcasts named events to
all of them. The ``/ws`` router registers and removes clients; routers that
need to notify receive a Channel instance when they are built.
"""
import json
import logging
from typing import Set

from starlette.websockets import WebSocket

logger = logging.getLogger("uvicorn.error")

class Channel:
    """
    Broadcast channel over WebSocket connections.

    - Router is responsible for ws.accept(); this class only tracks and sends
    - Every event goes to every connected client as one JSON text frame:
      {"event": <name>, "data": <payload>}
    - A client whose send fails is dropped from the channel
    """
    def __init__(self):
        self._clients: Set[WebSocket] = set()

    @property
    def client_count(self) -> int:
        """Number of currently connected clients."""
        return len(self._clients)

    # -------- connect / disconnect (no accept, only register) --------
    async def connect(self, ws: WebSocket):
        """
        Register a WebSocket connection to receive events.

        Args:
            ws: Accepted WebSocket connection
        """
        self._clients.add(ws)

    def disconnect(self, ws: WebSocket):
        """
        Stop sending events to a WebSocket connection.
        Unknown connections are ignored.
        """
        self._clients.discard(ws)

    # -------- publish --------
    async def emit(self, event: str, payload: dict):
        """
        Send an event to every connected client.

        Args:
            event: Event name, e.g. "messageUpdate"
            payload: JSON-serializable event data
        """
        conns = list(self._clients)
        msg = json.dumps({"event": event, "data": payload})
        for s in conns:
            try:
                await s.send_text(msg)
            except Exception as e:
                logger.info("[pubsub] dropping client after failed %s send: %r", event, e)
                self.disconnect(s)

# Default channel used by the application
channel = Channel()
