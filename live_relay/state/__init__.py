from .runtime import RuntimeDeps
from .session import SessionState
from .settings import AppSettings
from .relay import Frame, RelayOutcome, RelaySession, DirectionStats

__all__ = [
    "AppSettings",
    "DirectionStats",
    "Frame",
    "RelayOutcome",
    "RelaySession",
    "RuntimeDeps",
    "SessionState",
]
