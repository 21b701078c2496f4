"""Close helpers that tolerate already-closed transports."""

from __future__ import annotations

import logging

from .endpoint import RelayEndpoint

logger = logging.getLogger(__name__)


async def safe_close(endpoint: RelayEndpoint, *, code: int, reason: str = "") -> bool:
    try:
        await endpoint.close(code=code, reason=reason)
    except Exception:
        logger.debug("close failed for %r", endpoint, exc_info=True)
        return False
    return True


__all__ = ["safe_close"]
