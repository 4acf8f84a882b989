"""Exceptions raised inside the chat core."""


class ChatError(Exception):
    """Base class for chat core errors."""


class UnknownParticipantError(ChatError, KeyError):
    """Raised when a handle is not (or no longer) registered."""

    def __init__(self, handle: str):
        super().__init__(handle)
        self.handle = handle

    def __str__(self) -> str:
        return f"Unknown participant handle: {self.handle}"
