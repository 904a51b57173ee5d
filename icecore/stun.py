"""Minimal STUN message codec and helpers used by ICE."""

from __future__ import annotations

import ipaddress
import secrets
import socket
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from .errors import (
    AttributeNotFoundError,
    AttributeSizeError,
    StunDecodeError,
    UsernameMismatchError,
    XorMappedAddressError,
)

MAGIC_COOKIE = 0x2112A442
HEADER_SIZE = 20
TRANSACTION_ID_SIZE = 12
ATTRIBUTE_HEADER_SIZE = 4
MAX_MESSAGE_SIZE = 1280

BINDING_REQUEST = 0x0001
BINDING_SUCCESS = 0x0101

_FAMILY_IPV4 = 0x01
_FAMILY_IPV6 = 0x02

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class AttrType(IntEnum):
    """STUN attribute types used by ICE."""

    USERNAME = 0x0006
    MESSAGE_INTEGRITY = 0x0008
    XOR_MAPPED_ADDRESS = 0x0020
    PRIORITY = 0x0024
    USE_CANDIDATE = 0x0025
    FINGERPRINT = 0x8028
    ICE_CONTROLLED = 0x8029
    ICE_CONTROLLING = 0x802A


def _attr_name(attr_type: int) -> str:
    try:
        return AttrType(attr_type).name
    except ValueError:
        return f"0x{attr_type:04x}"


def _new_transaction_id() -> bytes:
    return secrets.token_bytes(TRANSACTION_ID_SIZE)


@dataclass
class StunMessage:
    """A STUN message: type, transaction ID and ordered attributes."""

    message_type: int = BINDING_REQUEST
    transaction_id: bytes = field(default_factory=_new_transaction_id)
    attributes: list[tuple[int, bytes]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.transaction_id) != TRANSACTION_ID_SIZE:
            raise ValueError(
                f"transaction ID must be {TRANSACTION_ID_SIZE} bytes long"
            )

    def add(self, attr_type: int, value: bytes) -> None:
        """Append an attribute."""
        self.attributes.append((int(attr_type), bytes(value)))

    def get(self, attr_type: int) -> bytes:
        """Return the value of the first attribute of the given type."""
        for current, value in self.attributes:
            if current == attr_type:
                return value
        raise AttributeNotFoundError(
            f"{AttributeNotFoundError.default_message}: {_attr_name(attr_type)}"
        )

    def contains(self, attr_type: int) -> bool:
        return any(current == attr_type for current, _ in self.attributes)

    def encode(self) -> bytes:
        """Serialise the message to wire format."""
        body = b"".join(
            struct.pack("!HH", attr_type, len(value)) + value + b"\x00" * (-len(value) % 4)
            for attr_type, value in self.attributes
        )
        header = struct.pack("!HHI", self.message_type, len(body), MAGIC_COOKIE)
        return header + self.transaction_id + body

    @classmethod
    def decode(cls, raw: bytes) -> StunMessage:
        """Parse a message from wire format."""
        raw = bytes(raw)
        if len(raw) < HEADER_SIZE:
            raise StunDecodeError(f"{StunDecodeError.default_message}: too short")
        message_type, length, cookie = struct.unpack_from("!HHI", raw)
        if message_type & 0xC000:
            raise StunDecodeError(f"{StunDecodeError.default_message}: not a STUN message")
        if cookie != MAGIC_COOKIE:
            raise StunDecodeError(f"{StunDecodeError.default_message}: bad magic cookie")
        end = HEADER_SIZE + length
        if len(raw) < end:
            raise StunDecodeError(f"{StunDecodeError.default_message}: truncated body")

        message = cls(message_type=message_type, transaction_id=raw[8:HEADER_SIZE])
        offset = HEADER_SIZE
        while offset < end:
            if end - offset < ATTRIBUTE_HEADER_SIZE:
                raise StunDecodeError(
                    f"{StunDecodeError.default_message}: truncated attribute header"
                )
            attr_type, attr_len = struct.unpack_from("!HH", raw, offset)
            offset += ATTRIBUTE_HEADER_SIZE
            if offset + attr_len > end:
                raise StunDecodeError(
                    f"{StunDecodeError.default_message}: truncated attribute value"
                )
            message.attributes.append((attr_type, raw[offset : offset + attr_len]))
            offset += attr_len + (-attr_len % 4)
        return message


def check_size(attr_type: int, got: int, expected: int) -> None:
    """Raise AttributeSizeError unless got equals expected."""
    if got != expected:
        raise AttributeSizeError(
            f"{AttributeSizeError.default_message}: {_attr_name(attr_type)} "
            f"got {got}, expected {expected}"
        )


@dataclass(frozen=True)
class XorMappedAddress:
    """The XOR-MAPPED-ADDRESS attribute."""

    ip: IPAddress
    port: int

    def _mask(self, transaction_id: bytes) -> int:
        if isinstance(self.ip, ipaddress.IPv4Address):
            return MAGIC_COOKIE
        return int.from_bytes(MAGIC_COOKIE.to_bytes(4, "big") + transaction_id, "big")

    @classmethod
    def get_from(cls, message: StunMessage) -> XorMappedAddress:
        """Decode the attribute from a message."""
        attr = AttrType.XOR_MAPPED_ADDRESS
        value = message.get(attr)
        if len(value) < 4:
            raise AttributeSizeError(
                f"{AttributeSizeError.default_message}: {attr.name} too short"
            )
        family = value[1]
        port = int.from_bytes(value[2:4], "big") ^ (MAGIC_COOKIE >> 16)
        if family == _FAMILY_IPV4:
            check_size(attr, len(value), 8)
            ip: IPAddress = ipaddress.IPv4Address(
                int.from_bytes(value[4:8], "big") ^ MAGIC_COOKIE
            )
        elif family == _FAMILY_IPV6:
            check_size(attr, len(value), 20)
            mask = int.from_bytes(
                MAGIC_COOKIE.to_bytes(4, "big") + message.transaction_id, "big"
            )
            ip = ipaddress.IPv6Address(int.from_bytes(value[4:20], "big") ^ mask)
        else:
            raise StunDecodeError(
                f"{StunDecodeError.default_message}: unsupported address family {family}"
            )
        return cls(ip=ip, port=port)

    def add_to(self, message: StunMessage) -> None:
        """Encode the attribute into a message."""
        if isinstance(self.ip, ipaddress.IPv4Address):
            family, size = _FAMILY_IPV4, 4
        else:
            family, size = _FAMILY_IPV6, 16
        xored_ip = int(self.ip) ^ self._mask(message.transaction_id)
        value = (
            bytes((0, family))
            + (self.port ^ (MAGIC_COOKIE >> 16)).to_bytes(2, "big")
            + xored_ip.to_bytes(size, "big")
        )
        message.add(AttrType.XOR_MAPPED_ADDRESS, value)


def get_xor_mapped_address(
    sock: socket.socket, server_addr: tuple, timeout: float | None
) -> XorMappedAddress:
    """Send a binding request to server_addr and return the mapped address."""
    previous_timeout = sock.gettimeout()
    if timeout is not None and timeout > 0:
        sock.settimeout(timeout)
    try:
        request = StunMessage(message_type=BINDING_REQUEST)
        sock.sendto(request.encode(), server_addr)
        data, _ = sock.recvfrom(MAX_MESSAGE_SIZE)
    finally:
        sock.settimeout(previous_timeout)

    response = StunMessage.decode(data)
    try:
        return XorMappedAddress.get_from(response)
    except (AttributeNotFoundError, AttributeSizeError, StunDecodeError) as exc:
        raise XorMappedAddressError(
            f"{XorMappedAddressError.default_message}: {exc}"
        ) from exc


def assert_username(message: StunMessage, expected_username: str) -> None:
    """Raise unless the message carries a USERNAME equal to expected_username."""
    username = message.get(AttrType.USERNAME).decode("utf-8", errors="replace")
    if username != expected_username:
        raise UsernameMismatchError(
            f"{UsernameMismatchError.default_message} "
            f"expected({expected_username.encode().hex()}) "
            f"actual({username.encode().hex()})"
        )