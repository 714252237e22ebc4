"""
Lightweight WebSocket integration tests.
Tests connection establishment and that stored messages are pushed to
connected clients. Storage is stubbed; no database is needed.
"""
import asyncio
import datetime as dt
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

import fakeso.main as main_module
from fakeso.api.routers import ws as ws_router
from fakeso.core.pubsub import Channel
from fakeso.core.result import Ok
from fakeso.main import create_app
from fakeso.schemas.message import MessageOut
from fakeso.services import message_service


saved_message = MessageOut(
    _id="1",
    msg="Hello",
    msgFrom="sana",
    msgDateTime=dt.datetime(2024, 6, 4, tzinfo=dt.timezone.utc),
)


@pytest.fixture
def test_client(monkeypatch):
    """TestClient running the app lifespan with database hooks stubbed out."""
    monkeypatch.setattr(main_module, "init_db", AsyncMock())
    monkeypatch.setattr(main_module, "close_db", AsyncMock())
    channel = Channel()
    with TestClient(create_app(channel)) as client:
        client.channel = channel
        yield client


class TestWebSocketConnection:
    """Tests for WebSocket connection establishment."""

    def test_ws_accepts_connection(self, test_client):
        with test_client.websocket_connect("/ws") as websocket:
            assert websocket.receive_json() == {"event": "connected", "data": {}}
            assert test_client.channel.client_count == 1

    def test_ws_ignores_client_messages(self, test_client):
        with test_client.websocket_connect("/ws") as websocket:
            websocket.receive_json()
            websocket.send_text("hello")
            websocket.send_json({"type": "anything"})
            # Should not raise exception (connection remains open)
            assert test_client.channel.client_count == 1


class GoneWebSocket:
    """WebSocket whose peer leaves before the connected frame is sent."""

    async def accept(self):
        pass

    async def send_text(self, text: str):
        raise WebSocketDisconnect(code=1001)

    async def receive_text(self):
        raise WebSocketDisconnect(code=1001)


class TestWebSocketDisconnect:
    """Tests that closed connections leave the channel."""

    def test_client_gone_before_connected_frame_is_removed(self):
        channel = Channel()
        route = ws_router.build_router(channel).routes[0]

        asyncio.run(route.endpoint(GoneWebSocket()))

        assert channel.client_count == 0


class TestMessageUpdatePush:
    """Tests for the messageUpdate event."""

    def test_add_message_pushes_to_every_client(self, test_client, monkeypatch):
        monkeypatch.setattr(message_service, "save_message", AsyncMock(return_value=Ok(saved_message)))

        with test_client.websocket_connect("/ws") as ws1, test_client.websocket_connect("/ws") as ws2:
            ws1.receive_json()
            ws2.receive_json()

            resp = test_client.post(
                "/messaging/addMessage",
                json={"messageToAdd": {"msg": "Hello", "msgFrom": "sana", "msgDateTime": "2024-06-04T00:00:00Z"}},
            )
            assert resp.status_code == 201

            expected = {"event": "messageUpdate", "data": {"msg": resp.json()}}
            assert ws1.receive_json() == expected
            assert ws2.receive_json() == expected

    def test_invalid_message_pushes_nothing(self, test_client, monkeypatch):
        save_message = AsyncMock(return_value=Ok(saved_message))
        monkeypatch.setattr(message_service, "save_message", save_message)

        with test_client.websocket_connect("/ws") as websocket:
            websocket.receive_json()
            resp = test_client.post("/messaging/addMessage", json={"messageToAdd": {"msgFrom": "sana"}})
            assert resp.status_code == 400
            save_message.assert_not_awaited()


def test_healthz(test_client):
    resp = test_client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
