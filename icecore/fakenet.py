"""Packet-style access to a connected socket."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class PacketConn:
    """Wraps a connected socket so it can be used with read_from/write_to."""

    conn: Any

    def read_from(self, size: int) -> tuple[bytes, Any]:
        """Read up to size bytes; return them with the peer's address."""
        data = self.conn.recv(size)
        return data, self.conn.getpeername()

    def write_to(self, data: bytes, addr: Any = None) -> int:
        """Send data to the connected peer; addr is ignored."""
        return self.conn.send(data)

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> PacketConn:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()