"""Tests for transcript replay to late joiners."""

import pytest

from rosterchat.models.transcript_entry import TranscriptEntry
from rosterchat.services.message_broadcaster import Transcript
from rosterchat.services.session_bootstrap import SessionBootstrap

pytestmark = pytest.mark.asyncio


@pytest.fixture
def transcript():
    transcript = Transcript()
    transcript.append(TranscriptEntry(name="Alice", text="one"))
    transcript.append(TranscriptEntry(name=None, text="two"))
    transcript.append(TranscriptEntry(name="Bob", text="three"))
    return transcript


@pytest.mark.unit
async def test_replays_in_insertion_order_to_one_handle(transcript, transport):
    bootstrap = SessionBootstrap(transcript, transport)

    assert await bootstrap.replay("sid-new") == 3
    assert transport.payloads("sid-new", "message") == [
        {"name": "Alice", "text": "one"},
        {"name": None, "text": "two"},
        {"name": "Bob", "text": "three"},
    ]
    assert {h for h, _, _ in transport.sent} == {"sid-new"}


@pytest.mark.unit
async def test_replay_does_not_grow_transcript(transcript, transport):
    await SessionBootstrap(transcript, transport).replay("sid-new")

    assert len(transcript) == 3


@pytest.mark.unit
async def test_empty_transcript_sends_nothing(transport):
    assert await SessionBootstrap(Transcript(), transport).replay("sid-new") == 0
    assert transport.sent == []


@pytest.mark.unit
async def test_send_failure_stops_replay(transcript, transport):
    transport.failing.add("sid-new")

    assert await SessionBootstrap(transcript, transport).replay("sid-new") == 0
