"""Shared fixtures: fake transport, canned daemon payloads, and a throwaway Unix socket server."""

import json
import shutil
import socket
import tempfile
import threading
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from revault_client.config import Config


class FakeTransport:
    """In-memory transport replying from a method → response table."""

    def __init__(self, replies: dict[str, object | list[object]]) -> None:
        self.replies = replies
        self.requests: list[dict[str, object]] = []

    def request(self, payload: bytes) -> bytes:
        req = json.loads(payload)
        self.requests.append(req)
        reply = self.replies[req["method"]]
        if isinstance(reply, list):
            # A list is consumed one reply per call
            reply = reply.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, bytes):
            return reply
        return json.dumps(reply).encode()


@pytest.fixture
def sock_dir() -> Iterator[Path]:
    """Short temporary directory (AF_UNIX paths are limited to ~100 bytes)."""
    path = Path(tempfile.mkdtemp(prefix="rv", dir="/tmp"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def serve_once(sock_dir: Path) -> Iterator[Callable[..., Path]]:
    """Start a one-connection Unix server running ``handler`` in a thread; return its socket path."""
    threads: list[threading.Thread] = []
    servers: list[socket.socket] = []

    def start(handler: Callable[[socket.socket], None], sock_path: Path | None = None) -> Path:
        sock_path = sock_path or sock_dir / "revaultd_rpc"
        server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        server.bind(str(sock_path))
        server.listen(1)
        servers.append(server)

        def run() -> None:
            conn, _ = server.accept()
            with conn:
                handler(conn)

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        threads.append(thread)
        return sock_path

    yield start
    for thread in threads:
        thread.join(timeout=5)
    for server in servers:
        server.close()


@pytest.fixture
def cfg(tmp_path: Path) -> Config:
    """Config pointing at an empty data directory, single probe attempt."""
    return Config(data_dir=tmp_path, probe_attempts=1, probe_backoff=0)


@pytest.fixture
def make_transport() -> Callable[[dict[str, object | list[object]]], FakeTransport]:
    """Factory for in-memory transports."""
    return FakeTransport


@pytest.fixture
def getinfo_result() -> dict[str, object]:
    """``getinfo`` result of a synced mainnet daemon."""
    return {"blockheight": 600000, "network": "bitcoin", "sync": 1.0, "version": "0.1"}
