"""Transcript replay for late joiners."""

import logging

from rosterchat.connection.transport import Transport
from rosterchat.services.message_broadcaster import MESSAGE_EVENT, Transcript

logger = logging.getLogger(__name__)


class SessionBootstrap:
    """Sends the existing transcript privately to a newly connected handle."""

    def __init__(self, transcript: Transcript, transport: Transport):
        self._transcript = transcript
        self._transport = transport

    async def replay(self, handle: str) -> int:
        """Replay every transcript entry, oldest first, to one handle.

        Returns:
            Number of entries delivered
        """
        delivered = 0
        for entry in self._transcript.snapshot():
            try:
                await self._transport.send(handle, MESSAGE_EVENT, entry.to_payload())
            except Exception as e:
                logger.warning(
                    "[Bootstrap] Replay to %s stopped after %d entries: %s",
                    handle, delivered, e,
                )
                break
            delivered += 1

        if delivered:
            logger.debug("[Bootstrap] Replayed %d entries to late joiner | handle=%s", delivered, handle)
        return delivered
