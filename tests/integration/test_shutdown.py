from __future__ import annotations

import signal
import asyncio

import pytest
import websockets
from websockets.exceptions import ConnectionClosed

from tests.utils.waiting import wait_until
from tests.utils.settings import build_test_settings
from tests.utils.relay_server import running_relay
from tests.utils.mock_upstream import MockUpstream


@pytest.mark.asyncio
async def test_shutdown_sends_going_away_to_every_client() -> None:
    async with MockUpstream(reply_after=99) as upstream:
        async with running_relay(build_test_settings(upstream_url=upstream.url)) as relay:
            clients = [
                await websockets.connect(relay.ws_url(), subprotocols=[relay.subprotocol()]) for _ in range(3)
            ]
            for ws in clients:
                await ws.send(b"\x00")
            await wait_until(lambda: len(upstream.received) == 3)
            assert relay.deps.connections.count() == 3

            relay.server.handle_exit(signal.SIGTERM, None)

            for ws in clients:
                with pytest.raises(ConnectionClosed) as exc:
                    await asyncio.wait_for(ws.recv(), timeout=5.0)
                assert exc.value.rcvd is not None
                assert exc.value.rcvd.code == 1001
                assert exc.value.rcvd.reason == "Server shutting down"

            await asyncio.wait_for(relay.task, timeout=10.0)
            assert relay.deps.connections.count() == 0


@pytest.mark.asyncio
async def test_drain_with_no_clients_stops_server() -> None:
    async with running_relay(build_test_settings()) as relay:
        closed = await relay.server.drain()
        assert closed == 0
        assert relay.server.should_exit is True
        await asyncio.wait_for(relay.task, timeout=10.0)
