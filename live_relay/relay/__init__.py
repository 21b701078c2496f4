from .session import run_relay
from .closing import safe_close
from .endpoint import RelayEndpoint
from .forwarder import forward
from .client_endpoint import ClientEndpoint
from .upstream_endpoint import UpstreamEndpoint

__all__ = [
    "ClientEndpoint",
    "RelayEndpoint",
    "UpstreamEndpoint",
    "forward",
    "run_relay",
    "safe_close",
]
