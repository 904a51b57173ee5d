"""Network types (UDP/TCP over IPv4/IPv6) used by ICE candidates."""

from __future__ import annotations

import ipaddress
from enum import Enum
from typing import Union

from .errors import AddressParseError, DetermineNetworkTypeError

UDP = "udp"
TCP = "tcp"
UDP4 = "udp4"
UDP6 = "udp6"
TCP4 = "tcp4"
TCP6 = "tcp6"

IPLike = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address, None]


class NetworkType(Enum):
    """Transport protocol and IP family of a candidate."""

    UDP4 = 1
    UDP6 = 2
    TCP4 = 3
    TCP6 = 4

    def __str__(self) -> str:
        return {
            NetworkType.UDP4: UDP4,
            NetworkType.UDP6: UDP6,
            NetworkType.TCP4: TCP4,
            NetworkType.TCP6: TCP6,
        }[self]

    def is_udp(self) -> bool:
        return self in (NetworkType.UDP4, NetworkType.UDP6)

    def is_tcp(self) -> bool:
        return self in (NetworkType.TCP4, NetworkType.TCP6)

    def network_short(self) -> str:
        """Return "udp" or "tcp"."""
        return UDP if self.is_udp() else TCP

    def is_reliable(self) -> bool:
        return self.is_tcp()

    def is_ipv4(self) -> bool:
        return self in (NetworkType.UDP4, NetworkType.TCP4)

    def is_ipv6(self) -> bool:
        return self in (NetworkType.UDP6, NetworkType.TCP6)


def supported_network_types() -> list[NetworkType]:
    """All network types, in preference order."""
    return [NetworkType.UDP4, NetworkType.UDP6, NetworkType.TCP4, NetworkType.TCP6]


def _is_ipv4(ip: IPLike) -> bool:
    if ip is None:
        return False
    if isinstance(ip, str):
        try:
            ip = ipaddress.ip_address(ip)
        except ValueError as exc:
            raise AddressParseError(f"failed to parse address {ip!r}") from exc
    if isinstance(ip, ipaddress.IPv4Address):
        return True
    return ip.ipv4_mapped is not None


def determine_network_type(network: str, ip: IPLike) -> NetworkType:
    """Derive the network type from a network name prefix and an IP address."""
    ipv4 = _is_ipv4(ip)
    lowered = network.lower()
    if lowered.startswith(UDP):
        return NetworkType.UDP4 if ipv4 else NetworkType.UDP6
    if lowered.startswith(TCP):
        return NetworkType.TCP4 if ipv4 else NetworkType.TCP6
    raise DetermineNetworkTypeError(
        f"{DetermineNetworkTypeError.default_message} from {network} {ip}"
    )