"""Coercion of arbitrary event payloads into display strings."""

import json
from typing import Any

DEFAULT_DISPLAY_NAME = "Anonymous"


def to_display_text(value: Any) -> str:
    """Coerce an inbound payload into the string shown to other participants.

    Falsy payloads (None, "", 0, False, empty containers) become "". Text is
    passed through untouched, so whitespace-only text stays non-empty.
    """
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def to_display_name(value: Any) -> str:
    """Coerce an identify payload, falling back to the default name."""
    return to_display_text(value) or DEFAULT_DISPLAY_NAME
