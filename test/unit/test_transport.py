"""Tests for the Socket.IO transport and per-recipient broadcast."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from rosterchat.connection.transport import SocketIOTransport, broadcast

pytestmark = pytest.mark.asyncio


@pytest.mark.unit
async def test_socketio_transport_emits_to_single_sid():
    sio = MagicMock()
    sio.emit = AsyncMock()
    transport = SocketIOTransport(sio, namespace="/chat")

    await transport.send("sid-a", "roster", ["Alice"])

    sio.emit.assert_awaited_once_with("roster", ["Alice"], to="sid-a", namespace="/chat")


@pytest.mark.unit
async def test_broadcast_continues_past_failures(transport):
    transport.failing.update({"sid-a", "sid-c"})

    failed = await broadcast(transport, ["sid-a", "sid-b", "sid-c", "sid-d"], "message", {"text": "x"})

    assert failed == ["sid-a", "sid-c"]
    assert [h for h, _, _ in transport.sent] == ["sid-b", "sid-d"]


@pytest.mark.unit
async def test_broadcast_to_nobody(transport):
    assert await broadcast(transport, [], "roster", []) == []
