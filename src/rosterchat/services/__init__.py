"""Chat core services."""

from rosterchat.services.chat_room import ChatRoom
from rosterchat.services.connection_registry import ConnectionRegistry
from rosterchat.services.message_broadcaster import MessageBroadcaster, Transcript
from rosterchat.services.roster_broadcaster import RosterBroadcaster
from rosterchat.services.session_bootstrap import SessionBootstrap

__all__ = [
    "ChatRoom",
    "ConnectionRegistry",
    "MessageBroadcaster",
    "RosterBroadcaster",
    "SessionBootstrap",
    "Transcript",
]
