"""Request handlers: tokens, connection registry, HTTP routes and the relay WebSocket."""

__all__: list[str] = []
