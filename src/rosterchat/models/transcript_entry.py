"""TranscriptEntry data model - one delivered chat message."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class TranscriptEntry:
    """
    A chat message as it was broadcast.

    The sender name is a snapshot taken at send time; renaming the sender
    afterwards does not touch entries already recorded.
    """
    name: Optional[str]
    text: str

    def to_payload(self) -> Dict:
        """Payload carried by the "message" event."""
        return {"name": self.name, "text": self.text}
