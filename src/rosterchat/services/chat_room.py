"""Chat room: the server context that owns all chat state.

Event Flow:
- connect: register participant, replay transcript to it only
- identify: rename participant, publish roster to everyone
- message: record and broadcast to everyone (no roster publish)
- disconnect: unregister participant, publish roster to the rest

Every event runs to completion under one asyncio.Lock, including the
broadcasts it triggers, so registry and transcript have a single writer and a
newcomer's replay always precedes any later broadcast it receives.
"""

import asyncio
import logging
from typing import Any, List, Optional

from rosterchat.connection.transport import Transport
from rosterchat.models.participant import Participant
from rosterchat.models.transcript_entry import TranscriptEntry
from rosterchat.services.connection_registry import ConnectionRegistry
from rosterchat.services.message_broadcaster import MessageBroadcaster, Transcript
from rosterchat.services.roster_broadcaster import NameLookup, RosterBroadcaster
from rosterchat.services.session_bootstrap import SessionBootstrap
from rosterchat.utils.display_text import to_display_name

logger = logging.getLogger(__name__)


class ChatRoom:
    """Single chat room shared by every connection."""

    def __init__(
        self,
        transport: Transport,
        transcript_limit: Optional[int] = None,
        name_lookup: Optional[NameLookup] = None,
    ):
        self.registry = ConnectionRegistry()
        self.transcript = Transcript(max_entries=transcript_limit)
        self.messages = MessageBroadcaster(self.registry, transport, self.transcript)
        self.roster = RosterBroadcaster(self.registry, transport, name_lookup)
        self.bootstrap = SessionBootstrap(self.transcript, transport)
        self._lock = asyncio.Lock()

    @property
    def participant_count(self) -> int:
        return len(self.registry)

    def list_names(self) -> List[Optional[str]]:
        return self.registry.list_names()

    async def on_connect(self, handle: str) -> Participant:
        async with self._lock:
            if handle in self.registry:
                return self.registry.require(handle)
            participant = self.registry.add(handle)
            replayed = await self.bootstrap.replay(handle)
        logger.info(
            "[ChatRoom] Connected | handle=%s participants=%d replayed=%d",
            handle, self.participant_count, replayed,
        )
        return participant

    async def on_disconnect(self, handle: str) -> bool:
        """Remove a participant; a repeated disconnect is a no-op."""
        async with self._lock:
            participant = self.registry.remove(handle)
            if participant is None:
                logger.debug("[ChatRoom] Disconnect for unknown handle=%s ignored", handle)
                return False
            await self.roster.publish_roster()
        logger.info(
            "[ChatRoom] Disconnected | handle=%s name=%s participants=%d",
            handle, participant.name, self.participant_count,
        )
        return True

    async def on_identify(self, handle: str, raw_name: Any) -> Optional[str]:
        async with self._lock:
            if handle not in self.registry:
                logger.debug("[ChatRoom] Identify for unknown handle=%s ignored", handle)
                return None
            name = to_display_name(raw_name)
            self.registry.rename(handle, name)
            await self.roster.publish_roster()
        logger.info("[ChatRoom] Identified | handle=%s name=%s", handle, name)
        return name

    async def on_message(self, handle: str, raw_text: Any) -> Optional[TranscriptEntry]:
        async with self._lock:
            return await self.messages.on_message(handle, raw_text)
