from __future__ import annotations

import asyncio
import logging

import pytest

from tests.utils.fakes import FakeEndpoint
from live_relay.handlers.connections import ConnectionRegistry


@pytest.mark.asyncio
async def test_register_and_unregister() -> None:
    registry = ConnectionRegistry()
    conn = FakeEndpoint("a")

    await registry.register(conn)
    assert registry.count() == 1
    assert conn in registry

    assert await registry.unregister(conn) is True
    assert registry.count() == 0


@pytest.mark.asyncio
async def test_unregister_unknown_is_noop() -> None:
    registry = ConnectionRegistry()
    assert await registry.unregister(FakeEndpoint("ghost")) is False
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_duplicate_register_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    registry = ConnectionRegistry()
    conn = FakeEndpoint("dup")
    await registry.register(conn)
    with caplog.at_level(logging.ERROR, logger="live_relay.handlers.connections"):
        await registry.register(conn)
    assert registry.count() == 1
    assert "registered twice" in caplog.text


@pytest.mark.asyncio
async def test_broadcast_close_closes_all_and_empties() -> None:
    registry = ConnectionRegistry()
    conns = [FakeEndpoint(str(i)) for i in range(3)]
    for conn in conns:
        await registry.register(conn)

    closed = await registry.broadcast_close(1001, "Server shutting down")

    assert closed == 3
    assert registry.count() == 0
    for conn in conns:
        assert conn.closes == [(1001, "Server shutting down")]


@pytest.mark.asyncio
async def test_broadcast_close_tolerates_failing_close() -> None:
    registry = ConnectionRegistry()
    good = FakeEndpoint("good")
    bad = FakeEndpoint("bad", fail_close=True)
    await registry.register(bad)
    await registry.register(good)

    closed = await registry.broadcast_close(1001, "bye")

    assert closed == 1
    assert good.closes == [(1001, "bye")]
    assert registry.count() == 0


@pytest.mark.asyncio
async def test_unregister_after_broadcast_is_noop() -> None:
    registry = ConnectionRegistry()
    conn = FakeEndpoint("late")
    await registry.register(conn)
    await registry.broadcast_close(1001, "bye")
    assert await registry.unregister(conn) is False


@pytest.mark.asyncio
async def test_concurrent_register_unregister() -> None:
    registry = ConnectionRegistry()
    conns = [FakeEndpoint(str(i)) for i in range(50)]

    await asyncio.gather(*(registry.register(c) for c in conns))
    assert registry.count() == 50

    await asyncio.gather(*(registry.unregister(c) for c in conns[::2]))
    assert registry.count() == 25
