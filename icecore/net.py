"""Local interface discovery and UDP listening within a port range."""

from __future__ import annotations

import ipaddress
import logging
import random
import socket
from collections.abc import Callable, Iterable
from typing import Union

import psutil

from .errors import PortError
from .networktype import NetworkType

log = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
MAX_PORT = 0xFFFF


def _to_ip(ip: str | bytes | IPAddress) -> IPAddress:
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ip
    if isinstance(ip, (bytes, bytearray)):
        return ipaddress.ip_address(bytes(ip))
    return ipaddress.ip_address(ip.split("%", 1)[0])


def is_supported_ipv6(ip: str | bytes | IPAddress) -> bool:
    """Whether an IPv6 address is usable for ICE (RFC 8445 section 5.1.1.1)."""
    address = _to_ip(ip)
    if not isinstance(address, ipaddress.IPv6Address):
        return False
    packed = address.packed
    if not any(packed[:12]):
        return False  # IPv4-compatible IPv6
    if packed[0] == 0xFE and packed[1] & 0xC0 == 0xC0:
        return False  # site-local unicast
    if packed[0] == 0xFE and packed[1] & 0xC0 == 0x80:
        return False  # link-local unicast
    if packed[0] == 0xFF and packed[1] & 0x0F == 0x02:
        return False  # link-local multicast
    return True


def _is_loopback_interface(stats, addresses: list[IPAddress]) -> bool:
    flags = getattr(stats, "flags", "") or ""
    if "loopback" in flags.split(","):
        return True
    return any(address.is_loopback for address in addresses)


def local_interfaces(
    network_types: Iterable[NetworkType],
    interface_filter: Callable[[str], bool] | None = None,
    ip_filter: Callable[[IPAddress], bool] | None = None,
    include_loopback: bool = False,
) -> list[IPAddress]:
    """Return the local IPs suitable for host candidates of the given types."""
    network_types = list(network_types)
    ipv4_requested = any(t.is_ipv4() for t in network_types)
    ipv6_requested = any(t.is_ipv6() for t in network_types)

    all_addrs = psutil.net_if_addrs()
    all_stats = psutil.net_if_stats()

    ips: list[IPAddress] = []
    for name, entries in all_addrs.items():
        stats = all_stats.get(name)
        if stats is None or not stats.isup:
            continue

        addresses = []
        for entry in entries:
            if entry.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            try:
                addresses.append(_to_ip(entry.address))
            except ValueError:
                continue

        if _is_loopback_interface(stats, addresses) and not include_loopback:
            continue
        if interface_filter is not None and not interface_filter(name):
            continue

        for ip in addresses:
            if ip.is_loopback and not include_loopback:
                continue
            if isinstance(ip, ipaddress.IPv6Address):
                if not ipv6_requested or not is_supported_ipv6(ip):
                    continue
            elif not ipv4_requested:
                continue
            if ip_filter is not None and not ip_filter(ip):
                continue
            ips.append(ip)
    return ips


def _family(network: str, host: str | None) -> socket.AddressFamily:
    if network.endswith("6"):
        return socket.AF_INET6
    if network.endswith("4"):
        return socket.AF_INET
    if host and ":" in host:
        return socket.AF_INET6
    return socket.AF_INET


def _bind_udp(family: socket.AddressFamily, host: str | None, port: int) -> socket.socket:
    sock = socket.socket(family, socket.SOCK_DGRAM)
    try:
        sock.bind((host or "", port))
    except OSError:
        sock.close()
        raise
    return sock


def listen_udp_in_port_range(
    port_max: int,
    port_min: int,
    network: str = "udp",
    host: str | None = None,
    port: int = 0,
) -> socket.socket:
    """Bind a UDP socket, picking a free port in [port_min, port_max] at random."""
    family = _family(network, host)
    if port != 0 or (port_min == 0 and port_max == 0):
        return _bind_udp(family, host, port)

    low = port_min or 1
    high = port_max or MAX_PORT
    if low > high:
        raise PortError()

    start = random.randint(low, high)
    current = start
    while True:
        try:
            return _bind_udp(family, host, current)
        except OSError as exc:
            log.debug("Failed to listen %s:%d: %s", host or "", current, exc)
        current += 1
        if current > high:
            current = low
        if current == start:
            break
    raise PortError()