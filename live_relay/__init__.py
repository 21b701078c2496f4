"""Live transcription relay.

A WebSocket proxy that admits browser clients with short-lived session tokens
and relays audio and transcript frames to and from an upstream speech service.
"""

__all__: list[str] = []
