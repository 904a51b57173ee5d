import socket

import pytest

from icecore.fakenet import PacketConn


@pytest.fixture
def pair():
    first = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    second = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    first.bind(("127.0.0.1", 0))
    second.bind(("127.0.0.1", 0))
    first.connect(second.getsockname())
    second.connect(first.getsockname())
    first.settimeout(5)
    second.settimeout(5)
    yield first, second
    first.close()
    second.close()


def test_write_to_ignores_address(pair):
    first, second = pair
    conn = PacketConn(first)
    payload = b"ping"
    assert conn.write_to(payload, ("192.0.2.1", 9)) == len(payload)
    assert second.recv(100) == payload


def test_read_from_returns_peer(pair):
    first, second = pair
    conn = PacketConn(first)
    second.send(b"pong")
    data, addr = conn.read_from(1500)
    assert data == b"pong"
    assert addr == second.getsockname()


def test_close_via_context_manager(pair):
    first, _ = pair
    with PacketConn(first) as conn:
        assert conn.conn is first
    assert first.fileno() == -1