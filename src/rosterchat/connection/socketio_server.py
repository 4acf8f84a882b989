"""Socket.IO server for the chat room.

Inbound events (per connection):
- connect: join the room, receive the transcript replay
- identify: set the display name (payload coerced to a string)
- message: post a chat message (payload coerced to a string)
- disconnect: leave the room

Outbound events:
- message: {"name": ..., "text": ...}
- roster: list of participant names in connection order
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import socketio

from rosterchat.services.chat_room import ChatRoom

logger = logging.getLogger(__name__)


def create_sio(cors_allowed_origins: Union[str, List[str]] = "*") -> socketio.AsyncServer:
    """Create the async Socket.IO server."""
    return socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=cors_allowed_origins,
        ping_timeout=30,
        ping_interval=25,
        logger=False,  # Disable socket.io internal logging (too verbose)
        engineio_logger=False,
    )


def register_chat_handlers(sio: socketio.AsyncServer, room: ChatRoom, namespace: str = "/") -> None:
    """Route the four chat events of a namespace into the chat room."""

    @sio.event(namespace=namespace)
    async def connect(sid: str, environ: Dict, auth: Optional[Dict] = None):
        logger.info("[SocketIO] Connection | sid=%s", sid)
        await room.on_connect(sid)

    @sio.event(namespace=namespace)
    async def disconnect(sid: str, reason: Optional[str] = None):
        logger.info("[SocketIO] Disconnecting | sid=%s reason=%s", sid, reason)
        await room.on_disconnect(sid)

    @sio.on("identify", namespace=namespace)
    async def identify(sid: str, name: Any = None):
        await room.on_identify(sid, name)

    @sio.on("message", namespace=namespace)
    async def message(sid: str, text: Any = None):
        await room.on_message(sid, text)


def create_socketio_app(sio: socketio.AsyncServer, other_app) -> socketio.ASGIApp:
    """Create Socket.IO ASGI app wrapping another ASGI app.

    Args:
        sio: The Socket.IO server
        other_app: The main ASGI app (e.g., FastAPI)

    Returns:
        Combined ASGI app with Socket.IO
    """
    return socketio.ASGIApp(sio, other_asgi_app=other_app)
