from .url import build_url, resolve_params
from .parser import parse_upstream_event
from .dispatch import UpstreamEventHandler, dispatch_event
from .connector import connect
from .event_log import LoggingEventHandler

__all__ = [
    "LoggingEventHandler",
    "UpstreamEventHandler",
    "build_url",
    "connect",
    "dispatch_event",
    "parse_upstream_event",
    "resolve_params",
]
