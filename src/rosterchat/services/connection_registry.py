"""Registry of the participants currently connected to the chat room.

The registry is plain state: it knows who is connected and what they are
called. Broadcasting in response to changes is the chat room's job.
"""

import logging
from typing import Dict, List, Optional

from rosterchat.errors import UnknownParticipantError
from rosterchat.models.participant import Participant

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Live participants keyed by connection handle, in connection order."""

    def __init__(self):
        # dict keeps insertion order, used for both roster and fan-out
        self._participants: Dict[str, Participant] = {}

    def __len__(self) -> int:
        return len(self._participants)

    def __contains__(self, handle: object) -> bool:
        return handle in self._participants

    def add(self, handle: str) -> Participant:
        """Register a new participant with no name.

        Registering a handle twice returns the existing participant.
        """
        existing = self._participants.get(handle)
        if existing is not None:
            logger.warning("[Registry] Handle already registered | handle=%s", handle)
            return existing
        participant = Participant(handle=handle)
        self._participants[handle] = participant
        logger.debug("[Registry] Added | handle=%s count=%d", handle, len(self._participants))
        return participant

    def remove(self, handle: str) -> Optional[Participant]:
        """Remove a participant; returns None if it was already gone."""
        participant = self._participants.pop(handle, None)
        if participant is not None:
            logger.debug("[Registry] Removed | handle=%s count=%d", handle, len(self._participants))
        return participant

    def get(self, handle: str) -> Optional[Participant]:
        return self._participants.get(handle)

    def require(self, handle: str) -> Participant:
        participant = self._participants.get(handle)
        if participant is None:
            raise UnknownParticipantError(handle)
        return participant

    def rename(self, handle: str, name: str) -> Participant:
        participant = self.require(handle)
        participant.name = name
        return participant

    def handles(self) -> List[str]:
        """Snapshot of the live handles in registry order."""
        return list(self._participants)

    def snapshot(self) -> List[Participant]:
        """Point-in-time copy of the live participants in registry order."""
        return list(self._participants.values())

    def list_names(self) -> List[Optional[str]]:
        """Current roster; participants that never identified are None."""
        return [p.name for p in self._participants.values()]

    async def lookup_name(self, handle: str) -> Optional[str]:
        """Resolve one participant's name for roster computation."""
        return self.require(handle).name
