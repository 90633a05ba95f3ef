"""Shared fixtures for discovery tests.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import io
import socket
import threading

import pytest


STATS_1_4_14 = (
    b"STAT pid 1\r\n"
    b"STAT uptime 42\r\n"
    b"STAT version 1.4.14\r\n"
    b"STAT curr_connections 3\r\n"
    b"END\r\n"
)
STATS_1_4_13 = STATS_1_4_14.replace(b"1.4.14", b"1.4.13")

CONFIG_RESPONSE = (
    b"CONFIG cluster 0 147\r\n"
    b"2\r\n"
    b"node-1.cache.local|10.0.0.1|11211 node-2.cache.local|10.0.0.2|11211\r\n"
    b"\r\n"
    b"END\r\n"
)
LEGACY_RESPONSE = CONFIG_RESPONSE.replace(
    b"CONFIG cluster", b"VALUE AmazonElastiCache:cluster"
)


class FakeConnection:
    """Socket stand-in replaying a canned byte transcript."""

    def __init__(self, transcript: bytes):
        self.transcript = transcript
        self.sent = []
        self.closed = False

    def sendall(self, data: bytes) -> None:
        self.sent.append(data)

    def makefile(self, mode: str = "rb"):
        return io.BytesIO(self.transcript)

    def close(self) -> None:
        self.closed = True


class FakeEndpoint:
    """Configuration endpoint served over a socketpair."""

    def __init__(self, replies):
        self.replies = dict(replies)
        self.received = []
        self.client_sock, self._server_sock = socket.socketpair()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self) -> None:
        reader = self._server_sock.makefile("rb")
        try:
            for raw in reader:
                command = raw.decode().rstrip("\r\n")
                self.received.append(command)
                if command == "quit":
                    break
                reply = self.replies.get(command)
                if reply is None:
                    break
                self._server_sock.sendall(reply)
        finally:
            reader.close()
            self._server_sock.close()

    def connect(self, address, timeout):
        self.address = address
        self.timeout = timeout
        return self.client_sock

    def join(self) -> None:
        self._thread.join(timeout=5)


@pytest.fixture
def fake_connection():
    """Factory for FakeConnection objects."""
    return FakeConnection


@pytest.fixture
def endpoint_env(monkeypatch):
    """Point ELASTICACHE_ENDPOINT at a dummy address."""
    monkeypatch.setenv("ELASTICACHE_ENDPOINT", "cfg.cache.local:11211")
    return "cfg.cache.local:11211"


class FakeMemcached:
    """Single-connection memcached answering storage commands with one reply."""

    def __init__(self, reply: bytes):
        self.reply = reply
        self.received = []
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(1)
        self.port = self._listener.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def server(self) -> str:
        return f"127.0.0.1:{self.port}"

    def _serve(self) -> None:
        conn, _ = self._listener.accept()
        reader = conn.makefile("rb")
        try:
            while True:
                command = reader.readline()
                if not command:
                    break
                data = reader.readline()
                self.received.append((command, data))
                if b" noreply\r\n" not in command:
                    conn.sendall(self.reply)
        finally:
            reader.close()
            conn.close()
            self._listener.close()

    def join(self) -> None:
        self._thread.join(timeout=5)


@pytest.fixture
def fake_memcached():
    """Factory for FakeMemcached servers."""
    return FakeMemcached
