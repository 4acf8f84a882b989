"""Outbound transport used by the chat core.

The core only ever needs one primitive: send a named event to a single
connection. Broadcasts are a fan-out over that primitive so that one failing
recipient never stops delivery to the rest.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Protocol

import socketio

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Fire-and-forget delivery of an event to one connection."""

    async def send(self, handle: str, event: str, data: Any) -> None:
        ...


class SocketIOTransport:
    """Transport backed by a python-socketio AsyncServer."""

    def __init__(self, sio: socketio.AsyncServer, namespace: str = "/"):
        self._sio = sio
        self._namespace = namespace

    async def send(self, handle: str, event: str, data: Any) -> None:
        await self._sio.emit(event, data, to=handle, namespace=self._namespace)


async def broadcast(
    transport: Transport,
    handles: Iterable[str],
    event: str,
    data: Any,
) -> List[str]:
    """Send an event to every handle, in order.

    Args:
        transport: Outbound transport
        handles: Recipients, already in delivery order
        event: Event name
        data: Event payload

    Returns:
        Handles whose send raised
    """
    failed = []
    for handle in handles:
        try:
            await transport.send(handle, event, data)
        except Exception as e:
            logger.warning("[Broadcast] Failed to send %s to %s: %s", event, handle, e)
            failed.append(handle)
    return failed
