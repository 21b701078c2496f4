from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.utils.settings import TEST_SECRET, build_test_settings
from live_relay.state.settings import AppSettings


def pytest_configure() -> None:
    # Keep `import live_relay...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture
def secret() -> bytes:
    return TEST_SECRET


@pytest.fixture
def settings() -> AppSettings:
    return build_test_settings()
