"""Tests for the async wrappers around blocking daemon calls."""

import asyncio
import threading
from collections.abc import Callable
from typing import Any

import pytest

from revault_client import tasks
from revault_client.config import Config
from revault_client.daemon.errors import RPCError
from revault_client.revaultd import RevaultD


@pytest.fixture
def revaultd(cfg: Config, make_transport: Callable[..., Any], getinfo_result: dict[str, object]) -> RevaultD:
    """Facade on a fake transport with one vault and its transactions."""
    vault = {"amount": 5, "status": "active", "txid": "aaaa", "vout": 0}
    txs = {"outpoint": "aaaa:0", "deposit": {"hex": "02"}}
    return RevaultD.connect(
        cfg,
        transport=make_transport(
            {
                "getinfo": {"result": getinfo_result},
                "listvaults": {"result": {"vaults": [vault]}},
                "listtransactions": {"result": {"transactions": [txs]}},
            }
        ),
    )


class TestTasks:
    """Async helpers return the facade results."""

    def test_get_blockheight(self, revaultd: RevaultD) -> None:
        """Blockheight comes from getinfo."""
        assert asyncio.run(tasks.get_blockheight(revaultd)) == 600000

    def test_list_vaults(self, revaultd: RevaultD) -> None:
        """Vaults come paired with their transactions."""
        pairs = asyncio.run(tasks.list_vaults(revaultd))
        assert [(v.outpoint, t.outpoint) for v, t in pairs] == [("aaaa:0", "aaaa:0")]

    def test_list_transactions(self, revaultd: RevaultD) -> None:
        """Transactions are unwrapped from the response."""
        txs = asyncio.run(tasks.list_transactions(revaultd, ["aaaa:0"]))
        assert [t.outpoint for t in txs] == ["aaaa:0"]

    def test_runs_off_event_loop_thread(self, cfg: Config, getinfo_result: dict[str, object]) -> None:
        """Blocking call executes in a worker thread."""
        threads: list[int] = []

        class RecordingTransport:
            def request(self, payload: bytes) -> bytes:
                threads.append(threading.get_ident())
                return b'{"result": {"blockheight": 1, "network": "regtest", "sync": 0.5, "version": "0.3"}}'

        handle = RevaultD.connect(cfg, transport=RecordingTransport())
        threads.clear()

        async def main() -> int:
            return await tasks.get_blockheight(handle)

        assert asyncio.run(main()) == 1
        assert threads and threads[0] != threading.get_ident()

    def test_concurrent_calls(self, revaultd: RevaultD) -> None:
        """One handle serves concurrent tasks."""

        async def main() -> list[int]:
            return await asyncio.gather(*(tasks.get_blockheight(revaultd) for _ in range(8)))

        assert asyncio.run(main()) == [600000] * 8

    def test_error_propagates(self, cfg: Config, make_transport: Callable[..., Any], getinfo_result: dict[str, object]) -> None:
        """Daemon errors surface through the awaitable."""
        handle = RevaultD.connect(
            cfg,
            transport=make_transport(
                {"getinfo": [{"result": getinfo_result}, {"error": {"code": 1, "message": "boom"}}]}
            ),
        )
        with pytest.raises(RPCError, match="boom"):
            asyncio.run(tasks.get_info(handle))
