"""Test helpers.

Focused modules:
- settings.py: AppSettings factory with test secrets
- fakes.py: in-memory relay endpoints
- mock_upstream.py: local `websockets` server standing in for the speech service
- relay_server.py: runs the relay under uvicorn on an ephemeral port
- waiting.py: polling helper for async assertions
"""

from __future__ import annotations

from .waiting import wait_until
from .settings import TEST_SECRET, OTHER_SECRET, build_test_settings

__all__ = ["OTHER_SECRET", "TEST_SECRET", "build_test_settings", "wait_until"]
