from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pytest

from live_relay.errors import EndpointClosed
from live_relay.state.relay import Frame, DirectionStats
from live_relay.relay.forwarder import forward
from tests.utils.fakes import FakeEndpoint
from live_relay.upstream.events import CloseEvent, TranscriptEvent


@dataclass
class RecordingHandler:
    events: list[object] = field(default_factory=list)

    def on_transcript(self, event) -> None:
        self.events.append(event)

    def on_metadata(self, event) -> None:
        self.events.append(event)

    def on_speech_started(self, event) -> None:
        self.events.append(event)

    def on_utterance_end(self, event) -> None:
        self.events.append(event)

    def on_error(self, event) -> None:
        self.events.append(event)

    def on_close(self, event) -> None:
        self.events.append(event)

    def on_unhandled(self, event) -> None:
        self.events.append(event)


@pytest.mark.asyncio
async def test_frames_keep_order_and_type() -> None:
    src, dst = FakeEndpoint("src"), FakeEndpoint("dst")
    frames = [Frame(b"\x00\x01"), Frame("hello"), Frame(b"\x02"), Frame("")]
    src.feed(*frames, EndpointClosed(1000, ""))

    stats = await forward(src, dst, DirectionStats(label="t"))

    assert dst.sent == frames
    assert [f.is_text for f in dst.sent] == [False, True, False, True]
    assert stats.messages == 4
    assert stats.text_messages == 2
    assert stats.binary_messages == 2
    assert stats.close_code == 1000
    assert stats.error is None


@pytest.mark.asyncio
async def test_going_away_is_expected_closure() -> None:
    src, dst = FakeEndpoint("src"), FakeEndpoint("dst")
    src.feed(EndpointClosed(1001, "bye"))
    stats = await forward(src, dst, DirectionStats(label="t"))
    assert stats.close_code == 1001
    assert stats.error is None


@pytest.mark.asyncio
async def test_unexpected_close_is_recorded(caplog: pytest.LogCaptureFixture) -> None:
    src, dst = FakeEndpoint("src"), FakeEndpoint("dst")
    src.feed(Frame(b"x"), EndpointClosed(1006, "abnormal"))

    with caplog.at_level(logging.WARNING, logger="live_relay.relay.forwarder"):
        stats = await forward(src, dst, DirectionStats(label="t"))

    assert stats.close_code == 1006
    assert stats.error is not None
    assert "read error" in caplog.text


@pytest.mark.asyncio
async def test_write_error_ends_direction() -> None:
    src, dst = FakeEndpoint("src"), FakeEndpoint("dst", fail_send=True)
    src.feed(Frame(b"a"), Frame(b"b"))

    stats = await forward(src, dst, DirectionStats(label="t"))

    assert stats.messages == 1
    assert stats.error is not None and stats.error.startswith("write error")
    assert src.inbox.qsize() == 1


@pytest.mark.asyncio
async def test_text_frames_are_dispatched_and_forwarded_verbatim() -> None:
    src, dst = FakeEndpoint("src"), FakeEndpoint("dst")
    payload = '{"type":"Results","is_final":true,"channel":{"alternatives":[{"transcript":" hi "}]}}'
    src.feed(Frame(payload), Frame(b"\x00"), EndpointClosed(1000, "done"))
    handler = RecordingHandler()

    await forward(src, dst, DirectionStats(label="t"), events=handler)

    assert dst.sent[0] == Frame(payload)
    assert handler.events == [
        TranscriptEvent(transcript="hi", is_final=True, speech_final=False),
        CloseEvent(code=1000, reason="done"),
    ]


@pytest.mark.asyncio
async def test_binary_frames_are_sampled_in_logs(caplog: pytest.LogCaptureFixture) -> None:
    src, dst = FakeEndpoint("src"), FakeEndpoint("dst")
    src.feed(*(Frame(b"\x00" * 4) for _ in range(25)), Frame("ctl"), EndpointClosed(1000, ""))

    with caplog.at_level(logging.INFO, logger="live_relay.relay.forwarder"):
        await forward(src, dst, DirectionStats(label="c->u"), binary_log_every=10)

    frame_lines = [r.getMessage() for r in caplog.records if "message #" in r.getMessage()]
    assert frame_lines == [
        "[c->u] message #10 (binary: True, size: 4)",
        "[c->u] message #20 (binary: True, size: 4)",
        "[c->u] message #26 (binary: False, size: 3)",
    ]
