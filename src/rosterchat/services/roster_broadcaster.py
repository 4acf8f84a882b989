"""Roster publication.

Each participant's name is resolved as its own lookup task and the results
are joined in registry order. One failed lookup abandons the whole publish:
clients keep the previous roster until the next successful one.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from rosterchat.connection.transport import Transport, broadcast
from rosterchat.services.connection_registry import ConnectionRegistry

logger = logging.getLogger(__name__)

ROSTER_EVENT = "roster"

NameLookup = Callable[[str], Awaitable[Optional[str]]]


class RosterBroadcaster:
    """Publishes the list of participant names to every participant."""

    def __init__(
        self,
        registry: ConnectionRegistry,
        transport: Transport,
        name_lookup: Optional[NameLookup] = None,
    ):
        self._registry = registry
        self._transport = transport
        self._lookup = name_lookup or registry.lookup_name

    async def resolve_names(self, handles: List[str]) -> List[Optional[str]]:
        """Look up all names concurrently, failing on the first error."""
        tasks = [asyncio.create_task(self._lookup(handle)) for handle in handles]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def publish_roster(self) -> Optional[List[Optional[str]]]:
        """Broadcast the current roster.

        Returns:
            The published names, or None if resolution failed
        """
        handles = self._registry.handles()
        try:
            names = await self.resolve_names(handles)
        except Exception as e:
            logger.warning("[Roster] Name resolution failed, roster not published: %s", e)
            return None

        await broadcast(self._transport, handles, ROSTER_EVENT, names)
        logger.info("[Roster] Published | participants=%d names=%s", len(names), names)
        return names
