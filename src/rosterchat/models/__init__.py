"""Chat models package - re-exports for public API"""

from rosterchat.models.participant import Participant
from rosterchat.models.transcript_entry import TranscriptEntry

__all__ = [
    "Participant",
    "TranscriptEntry",
]
