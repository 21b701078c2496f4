"""Upstream speech service events (dataclasses only).

The relay forwards upstream frames verbatim; these types exist so that text
frames can be classified for logging without touching the payload.
"""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass


@dataclass(frozen=True, slots=True)
class TranscriptEvent:
    transcript: str
    is_final: bool = False
    speech_final: bool = False


@dataclass(frozen=True, slots=True)
class MetadataEvent:
    request_id: str = ""
    channels: int | None = None
    created: str = ""


@dataclass(frozen=True, slots=True)
class SpeechStartedEvent:
    timestamp: float | None = None


@dataclass(frozen=True, slots=True)
class UtteranceEndEvent:
    last_word_end: float | None = None


@dataclass(frozen=True, slots=True)
class ErrorEvent:
    message: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class CloseEvent:
    code: int
    reason: str = ""


@dataclass(frozen=True, slots=True)
class UnhandledEvent:
    event_type: str | None
    raw: dict[str, Any] = field(default_factory=dict)


UpstreamEvent = (
    TranscriptEvent
    | MetadataEvent
    | SpeechStartedEvent
    | UtteranceEndEvent
    | ErrorEvent
    | CloseEvent
    | UnhandledEvent
)

__all__ = [
    "CloseEvent",
    "ErrorEvent",
    "MetadataEvent",
    "SpeechStartedEvent",
    "TranscriptEvent",
    "UnhandledEvent",
    "UpstreamEvent",
    "UtteranceEndEvent",
]
