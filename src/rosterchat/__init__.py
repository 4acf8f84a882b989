"""rosterchat - a broadcast chat room with a live participant roster."""

__version__ = "1.0.0"
