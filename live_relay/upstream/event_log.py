"""Upstream event handler that only writes log lines."""

from __future__ import annotations

import logging

from .events import (
    CloseEvent,
    ErrorEvent,
    MetadataEvent,
    UnhandledEvent,
    TranscriptEvent,
    UtteranceEndEvent,
    SpeechStartedEvent,
)

logger = logging.getLogger(__name__)


class LoggingEventHandler:
    def __init__(self, session_id: str) -> None:
        self._session_id = session_id

    def on_transcript(self, event: TranscriptEvent) -> None:
        if not event.transcript:
            return
        kind = "final" if event.is_final else "interim"
        logger.debug("[%s] %s transcript: %s", self._session_id, kind, event.transcript)

    def on_metadata(self, event: MetadataEvent) -> None:
        logger.info(
            "[%s] upstream metadata request_id=%s channels=%s created=%s",
            self._session_id,
            event.request_id,
            event.channels,
            event.created,
        )

    def on_speech_started(self, event: SpeechStartedEvent) -> None:
        logger.debug("[%s] speech started at %s", self._session_id, event.timestamp)

    def on_utterance_end(self, event: UtteranceEndEvent) -> None:
        logger.debug("[%s] utterance end at %s", self._session_id, event.last_word_end)

    def on_error(self, event: ErrorEvent) -> None:
        logger.warning("[%s] upstream error: %s %s", self._session_id, event.message, event.description)

    def on_close(self, event: CloseEvent) -> None:
        logger.info("[%s] upstream closed code=%s reason=%s", self._session_id, event.code, event.reason)

    def on_unhandled(self, event: UnhandledEvent) -> None:
        logger.debug("[%s] unhandled upstream message type=%s", self._session_id, event.event_type)


__all__ = ["LoggingEventHandler"]
