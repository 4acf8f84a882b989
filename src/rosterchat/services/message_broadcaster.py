"""Chat message relay and the in-memory transcript it maintains.

Transcript Structure:
- Entries are appended in broadcast order and never rewritten
- Each entry carries the sender name as it was at send time
- Growth is unbounded unless a max_entries limit is configured; the
  transcript lives only as long as the process
"""

import logging
from collections import deque
from typing import Any, Deque, Iterator, List, Optional

from rosterchat.connection.transport import Transport, broadcast
from rosterchat.models.transcript_entry import TranscriptEntry
from rosterchat.services.connection_registry import ConnectionRegistry
from rosterchat.utils.display_text import to_display_text

logger = logging.getLogger(__name__)

MESSAGE_EVENT = "message"


class Transcript:
    """Ordered history of broadcast messages."""

    def __init__(self, max_entries: Optional[int] = None):
        self._entries: Deque[TranscriptEntry] = deque(maxlen=max_entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(self.snapshot())

    @property
    def max_entries(self) -> Optional[int]:
        return self._entries.maxlen

    def append(self, entry: TranscriptEntry) -> None:
        self._entries.append(entry)

    def snapshot(self) -> List[TranscriptEntry]:
        """Read-only copy in insertion order."""
        return list(self._entries)


class MessageBroadcaster:
    """Relays chat messages to every participant and records them."""

    def __init__(
        self,
        registry: ConnectionRegistry,
        transport: Transport,
        transcript: Optional[Transcript] = None,
    ):
        self._registry = registry
        self._transport = transport
        self.transcript = transcript if transcript is not None else Transcript()

    async def on_message(self, handle: str, raw_text: Any) -> Optional[TranscriptEntry]:
        """Broadcast a message from a participant.

        Args:
            handle: Sender's connection handle
            raw_text: Message payload as received

        Returns:
            The recorded entry, or None when the message was dropped
        """
        participant = self._registry.get(handle)
        if participant is None:
            logger.debug("[Messages] Ignoring message from unknown handle=%s", handle)
            return None

        text = to_display_text(raw_text)
        if not text:
            return None

        entry = TranscriptEntry(name=participant.name, text=text)
        self.transcript.append(entry)

        recipients = self._registry.handles()
        failed = await broadcast(self._transport, recipients, MESSAGE_EVENT, entry.to_payload())
        logger.debug(
            "[Messages] Broadcast from %s to %d participants (%d failed)",
            handle, len(recipients), len(failed),
        )
        return entry
