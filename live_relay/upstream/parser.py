"""Classification of upstream text frames into `UpstreamEvent` variants."""

from __future__ import annotations

from typing import Any

import orjson

from .events import (
    ErrorEvent,
    MetadataEvent,
    UpstreamEvent,
    UnhandledEvent,
    TranscriptEvent,
    UtteranceEndEvent,
    SpeechStartedEvent,
)


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _first_transcript(msg: dict[str, Any]) -> str:
    channel = msg.get("channel")
    if not isinstance(channel, dict):
        return ""
    alternatives = channel.get("alternatives")
    if not isinstance(alternatives, list) or not alternatives:
        return ""
    first = alternatives[0]
    if not isinstance(first, dict):
        return ""
    transcript = first.get("transcript")
    return transcript.strip() if isinstance(transcript, str) else ""


def parse_upstream_event(text: str) -> UpstreamEvent:
    try:
        msg = orjson.loads(text)
    except orjson.JSONDecodeError:
        return UnhandledEvent(event_type=None)

    if not isinstance(msg, dict):
        return UnhandledEvent(event_type=None)

    msg_type = msg.get("type")
    if msg_type == "Results":
        return TranscriptEvent(
            transcript=_first_transcript(msg),
            is_final=bool(msg.get("is_final", False)),
            speech_final=bool(msg.get("speech_final", False)),
        )
    if msg_type == "Metadata":
        channels = msg.get("channels")
        return MetadataEvent(
            request_id=str(msg.get("request_id") or ""),
            channels=channels if isinstance(channels, int) and not isinstance(channels, bool) else None,
            created=str(msg.get("created") or ""),
        )
    if msg_type == "SpeechStarted":
        return SpeechStartedEvent(timestamp=_as_float(msg.get("timestamp")))
    if msg_type == "UtteranceEnd":
        return UtteranceEndEvent(last_word_end=_as_float(msg.get("last_word_end")))
    if msg_type == "Error":
        return ErrorEvent(
            message=str(msg.get("message") or msg.get("err_msg") or ""),
            description=str(msg.get("description") or ""),
        )
    return UnhandledEvent(event_type=msg_type if isinstance(msg_type, str) else None, raw=msg)


__all__ = ["parse_upstream_event"]
