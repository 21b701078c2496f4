"""Single-interface dispatch over upstream event variants."""

from __future__ import annotations

from typing import Protocol, assert_never

from .events import (
    CloseEvent,
    ErrorEvent,
    MetadataEvent,
    UpstreamEvent,
    UnhandledEvent,
    TranscriptEvent,
    UtteranceEndEvent,
    SpeechStartedEvent,
)


class UpstreamEventHandler(Protocol):
    def on_transcript(self, event: TranscriptEvent) -> None: ...

    def on_metadata(self, event: MetadataEvent) -> None: ...

    def on_speech_started(self, event: SpeechStartedEvent) -> None: ...

    def on_utterance_end(self, event: UtteranceEndEvent) -> None: ...

    def on_error(self, event: ErrorEvent) -> None: ...

    def on_close(self, event: CloseEvent) -> None: ...

    def on_unhandled(self, event: UnhandledEvent) -> None: ...


def dispatch_event(event: UpstreamEvent, handler: UpstreamEventHandler) -> None:
    if isinstance(event, TranscriptEvent):
        handler.on_transcript(event)
    elif isinstance(event, MetadataEvent):
        handler.on_metadata(event)
    elif isinstance(event, SpeechStartedEvent):
        handler.on_speech_started(event)
    elif isinstance(event, UtteranceEndEvent):
        handler.on_utterance_end(event)
    elif isinstance(event, ErrorEvent):
        handler.on_error(event)
    elif isinstance(event, CloseEvent):
        handler.on_close(event)
    elif isinstance(event, UnhandledEvent):
        handler.on_unhandled(event)
    else:
        assert_never(event)


__all__ = ["UpstreamEventHandler", "dispatch_event"]
