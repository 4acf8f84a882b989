"""Participant data model - one live connection in the chat room."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Participant:
    """A connected participant and its self-declared display name."""
    handle: str
    name: Optional[str] = None  # None until the participant identifies
    connected_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_identified(self) -> bool:
        return self.name is not None
