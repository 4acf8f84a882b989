"""Shared fixtures for chat tests."""

from typing import Any, List, Optional, Set, Tuple

import pytest

from rosterchat.services.chat_room import ChatRoom


class RecordingTransport:
    """Transport stub that records every send and can fail chosen handles."""

    def __init__(self):
        self.sent: List[Tuple[str, str, Any]] = []
        self.failing: Set[str] = set()

    async def send(self, handle: str, event: str, data: Any) -> None:
        if handle in self.failing:
            raise ConnectionError(f"socket {handle} is gone")
        self.sent.append((handle, event, data))

    def received(self, handle: str, event: Optional[str] = None) -> List[Tuple[str, Any]]:
        """(event, data) pairs delivered to one handle, in order."""
        return [
            (e, data) for h, e, data in self.sent
            if h == handle and (event is None or e == event)
        ]

    def payloads(self, handle: str, event: str) -> List[Any]:
        return [data for _, data in self.received(handle, event)]

    def clear(self) -> None:
        self.sent.clear()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def room(transport):
    return ChatRoom(transport)
